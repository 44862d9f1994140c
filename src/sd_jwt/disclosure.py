"""Disclosures and their digests.

A disclosure is the base64url encoding of a serialized array:
``[salt, claim_name, claim_value]`` for object properties and
``[salt, value]`` for array elements. Its digest is computed over the
base64url text itself, so the serializer must be deterministic.
"""

from typing import Any, NamedTuple, Optional

from . import json_utils
from .hash import hash_data
from .options import SDStringify


class Disclosure(NamedTuple):
    """Decoded contents of a disclosure."""

    salt: str
    claim_name: Optional[str]
    value: Any

    @property
    def is_array_element(self) -> bool:
        return self.claim_name is None


def disclosure_for_object_props(
    salt: str, claim_name: str, claim_value: Any, stringify: SDStringify = json_utils.stringify
) -> str:
    """Create a disclosure for an object property.

    Args:
        salt: base64url-encoded salt
        claim_name: Name of the claim
        claim_value: Value of the claim
        stringify: Serializer for the disclosure array

    Returns:
        base64url-encoded disclosure
    """
    return json_utils.b64url_encode_text(stringify([salt, claim_name, claim_value]))


def disclosure_for_array_element(
    salt: str, element: Any, stringify: SDStringify = json_utils.stringify
) -> str:
    """Create a disclosure for an array element.

    Args:
        salt: base64url-encoded salt
        element: The array element
        stringify: Serializer for the disclosure array

    Returns:
        base64url-encoded disclosure
    """
    return json_utils.b64url_encode_text(stringify([salt, element]))


def digest_of(disclosure: str, hash_alg: str) -> str:
    """Hash a disclosure.

    Args:
        disclosure: base64url-encoded disclosure
        hash_alg: Hash algorithm name

    Returns:
        base64url-encoded digest

    Raises:
        ProhibitedHashAlgorithmError: If the algorithm is prohibited
        UnsupportedHashAlgorithmError: If the algorithm has no implementation
    """
    return json_utils.b64url_encode(hash_data(disclosure.encode("ascii"), hash_alg))


def decode_disclosure(disclosure: str) -> Disclosure:
    """Decode a disclosure back into its salt, claim name and value.

    Args:
        disclosure: base64url-encoded disclosure

    Returns:
        Decoded disclosure; ``claim_name`` is None for array elements

    Raises:
        ValueError: If the disclosure is not a 2- or 3-element array with
            string salt and claim name
    """
    decoded = json_utils.loads(json_utils.b64url_decode_text(disclosure))
    if not isinstance(decoded, list) or len(decoded) not in (2, 3):
        raise ValueError("Disclosure must be an array of 2 or 3 elements")
    if not isinstance(decoded[0], str):
        raise ValueError("Disclosure salt must be a string")
    if len(decoded) == 2:
        return Disclosure(decoded[0], None, decoded[1])
    if not isinstance(decoded[1], str):
        raise ValueError("Disclosure claim name must be a string")
    return Disclosure(decoded[0], decoded[1], decoded[2])
