"""JSON and base64url utilities module.

This module provides a unified interface for the text serialization and
base64url operations used by disclosures, isolating the underlying
implementation from the redaction code.
"""

import base64
import json
from typing import Any


def stringify(value: Any) -> str:
    """Serialize a value to compact JSON.

    Non-ASCII characters are written as-is and key order is preserved,
    matching ``JSON.stringify``.

    Args:
        value: JSON-compatible value

    Returns:
        JSON text
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def fancy_stringify(value: Any) -> str:
    """Serialize a value with a space after every comma and colon.

    This is the format of the examples in the SD-JWT draft. Commas and
    colons inside strings are spaced too.

    Args:
        value: JSON-compatible value

    Returns:
        JSON text
    """
    return stringify(value).replace(",", ", ").replace(":", ": ")


def loads(text: str) -> Any:
    """Parse JSON text.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
    """
    return json.loads(text)


def b64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(data: str) -> bytes:
    """Decode base64url text, with or without padding.

    Raises:
        binascii.Error: If the text is not valid base64url
    """
    padded = data + "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def b64url_encode_text(text: str) -> str:
    """Encode UTF-8 text as base64url without padding."""
    return b64url_encode(text.encode("utf-8"))


def b64url_decode_text(data: str) -> str:
    """Decode base64url text into a UTF-8 string."""
    return b64url_decode(data).decode("utf-8")
