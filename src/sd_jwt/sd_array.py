"""Selectively disclosable array elements.

A redacted element is replaced in place by ``{"...": digest}``, so the
array keeps its length and the order of the remaining elements.
"""

from collections.abc import Iterable, Sequence
from typing import Any, NamedTuple

from . import json_utils
from .disclosure import digest_of, disclosure_for_array_element
from .logging_config import get_logger
from .options import ResolvedDisclosureOptions

logger = get_logger(__name__)

ARRAY_ELEMENT_DIGEST_KEY = "..."


class SDArrayResult(NamedTuple):
    """An array with redacted elements and the disclosures for them."""

    sd_array: list[Any]
    disclosures: list[str]


def array_element_digest(digest: str) -> dict[str, str]:
    """Build the placeholder for a redacted array element."""
    return {ARRAY_ELEMENT_DIGEST_KEY: digest}


def is_array_element_digest(value: Any) -> bool:
    """Return True if the value is a redacted array element placeholder."""
    return (
        isinstance(value, dict)
        and len(value) == 1
        and isinstance(value.get(ARRAY_ELEMENT_DIGEST_KEY), str)
    )


def sd_array(
    array: Sequence[Any], indices: Iterable[int], options: ResolvedDisclosureOptions
) -> SDArrayResult:
    """Make array elements selectively disclosable.

    Disclosures are emitted in ascending index order regardless of the
    order of ``indices``. Indices outside the array are ignored, and so
    are values that are not ``int`` (including ``bool`` and ``float``).

    Args:
        array: The original array
        indices: Positions of the elements to redact
        options: Resolved disclosure options

    Returns:
        The new array and the disclosures for its redacted elements
    """
    # bool is an int subclass; True must not select position 1
    selected = {i for i in indices if isinstance(i, int) and not isinstance(i, bool)}
    new_array: list[Any] = []
    disclosures: list[str] = []
    for index, element in enumerate(array):
        if index not in selected:
            new_array.append(element)
            continue
        salt = json_utils.b64url_encode(options.create_salt())
        disclosure = disclosure_for_array_element(salt, element, options.stringify)
        new_array.append(array_element_digest(digest_of(disclosure, options.hash_alg)))
        disclosures.append(disclosure)

    logger.debug(
        "array_elements_redacted",
        length=len(new_array),
        redacted=len(disclosures),
        hash_alg=options.hash_alg,
    )
    return SDArrayResult(new_array, disclosures)
