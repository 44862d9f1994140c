"""Selectively disclosable JSON objects.

An :class:`SDObject` pairs a payload with the disclosures produced for it.
Every operation returns a new ``SDObject``; the receiver is never modified,
so a value can be shared and branched freely.

Digests of disclosures for object properties are collected under ``_sd``
in the object they were removed from. The hash algorithm used for them is
declared under ``_sd_alg``.
"""

import copy
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Union

from . import json_utils
from .disclosure import digest_of, disclosure_for_object_props
from .errors import InconsistentHashAlgorithmError
from .hash import SD_DEFAULT_HASH_ALG
from .logging_config import get_logger
from .options import OptionsLike, as_disclosure_options, fill_sd_options
from .sd_array import sd_array

logger = get_logger(__name__)

SD_KEY = "_sd"
SD_ALG_KEY = "_sd_alg"
RESERVED_KEYS = (SD_KEY, SD_ALG_KEY)


@dataclass(frozen=True)
class SDProps:
    """Redaction metadata of one object.

    Attributes:
        sd_alg: Hash algorithm declared by the payload, rendered as ``_sd_alg``
        sd: Digests of redacted properties, rendered as ``_sd``
    """

    sd_alg: Optional[str] = None
    sd: Optional[tuple[str, ...]] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "SDProps":
        sd = payload.get(SD_KEY)
        return cls(
            sd_alg=payload.get(SD_ALG_KEY),
            sd=tuple(sd) if sd is not None else None,
        )

    def to_payload(self) -> dict[str, Any]:
        """Render the reserved keys, omitting the ones that are unset."""
        rendered: dict[str, Any] = {}
        if self.sd is not None:
            rendered[SD_KEY] = list(self.sd)
        if self.sd_alg is not None:
            rendered[SD_ALG_KEY] = self.sd_alg
        return rendered


def _strip_reserved(payload: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in payload.items() if k not in RESERVED_KEYS}


class SDObject:
    """A JSON object with selectively disclosable properties."""

    __slots__ = ("_claims", "_sd_props", "_disclosures")
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        claims: Mapping[str, Any],
        sd_props: SDProps = SDProps(),
        disclosures: Iterable[str] = (),
    ):
        """Initialize from claims without reserved keys.

        Use :meth:`pure` to lift an arbitrary payload.

        Args:
            claims: User claims
            sd_props: Redaction metadata
            disclosures: Disclosures produced so far, in creation order

        Raises:
            ValueError: If ``claims`` contains ``_sd`` or ``_sd_alg``
        """
        reserved = [key for key in RESERVED_KEYS if key in claims]
        if reserved:
            raise ValueError(
                f"Reserved keys {reserved} must be passed as SDProps; use SDObject.pure()"
            )
        self._claims = copy.deepcopy(dict(claims))
        self._sd_props = sd_props
        self._disclosures = tuple(disclosures)

    @classmethod
    def pure(cls, obj: Mapping[str, Any]) -> "SDObject":
        """Lift a plain object to an ``SDObject``.

        ``_sd`` starts empty. An ``_sd_alg`` already present in ``obj`` is kept.
        """
        return cls(_strip_reserved(obj), SDProps(sd_alg=obj.get(SD_ALG_KEY), sd=()), ())

    @property
    def claims(self) -> dict[str, Any]:
        """The payload without reserved keys."""
        return copy.deepcopy(self._claims)

    @property
    def sd_props(self) -> SDProps:
        return self._sd_props

    @property
    def sd_alg(self) -> Optional[str]:
        return self._sd_props.sd_alg

    @property
    def sd_digests(self) -> list[str]:
        return list(self._sd_props.sd or ())

    @property
    def payload(self) -> dict[str, Any]:
        """The payload with ``_sd`` and ``_sd_alg`` after the claims."""
        return {**copy.deepcopy(self._claims), **self._sd_props.to_payload()}

    @property
    def disclosures(self) -> list[str]:
        return list(self._disclosures)

    def map(self, f: Callable[[dict[str, Any]], Mapping[str, Any]]) -> "SDObject":
        """Apply a function to the payload, keeping metadata and disclosures.

        ``f`` MUST NOT return the payload of another ``SDObject``, or its
        disclosures are lost. Use :meth:`flat_map` for that. Reserved keys
        returned by ``f`` are ignored.

        Args:
            f: Function from the current payload to new claims

        Returns:
            Transformed object with disclosures kept as they are
        """
        return SDObject(_strip_reserved(f(self.payload)), self._sd_props, self._disclosures)

    def flat_map(self, f: Callable[[dict[str, Any]], "SDObject"]) -> "SDObject":
        """Apply a function returning another ``SDObject`` and merge the two.

        The result has the claims and ``_sd_alg`` of the returned object,
        this object's ``_sd`` followed by the returned one, and this object's
        disclosures followed by the returned ones. An undeclared algorithm
        counts as ``sha-256``.

        Args:
            f: Function from the current payload to an ``SDObject``

        Returns:
            The merged object

        Raises:
            InconsistentHashAlgorithmError: If the two hash algorithms differ
            TypeError: If ``f`` does not return an ``SDObject``
        """
        other = f(self.payload)
        if not isinstance(other, SDObject):
            raise TypeError(f"flat_map expects an SDObject, got {type(other).__name__}")
        current_alg = self.sd_alg or SD_DEFAULT_HASH_ALG
        other_alg = other.sd_alg or SD_DEFAULT_HASH_ALG
        if current_alg != other_alg:
            raise InconsistentHashAlgorithmError(
                current_alg, other_alg, f"Inconsistent hashing algorithms: {current_alg} and {other_alg}."
            )
        sd_props = SDProps(
            sd_alg=other.sd_alg,
            sd=(self._sd_props.sd or ()) + (other._sd_props.sd or ()),
        )
        return SDObject(other._claims, sd_props, self._disclosures + other._disclosures)

    def prop(self, claim_names: Union[str, Iterable[str]], options: OptionsLike = None) -> "SDObject":
        """Make claims selectively disclosable.

        Each claim is removed from the payload and the digest of its
        disclosure is appended to ``_sd``, in the order of ``claim_names``.
        ``_sd_alg`` is set to the resolved hash algorithm.

        Args:
            claim_names: Names of the claims to make selectively disclosable
            options: Optional parameters to make disclosures and digests

        Returns:
            ``SDObject`` with selectively disclosable claims

        Raises:
            InconsistentHashAlgorithmError: If ``options.hash_alg`` conflicts
                with the payload's ``_sd_alg``
            KeyError: If a claim is not in the payload
        """
        if isinstance(claim_names, str):
            claim_names = [claim_names]
        claim_names = list(claim_names)
        resolved = fill_sd_options(self._sd_props, options)
        missing = [name for name in claim_names if name not in self._claims]
        if missing:
            raise KeyError(f"Claims not found in payload: {missing}")

        digests: list[str] = []
        new_disclosures: list[str] = []
        for claim_name in claim_names:
            salt = json_utils.b64url_encode(resolved.create_salt())
            disclosure = disclosure_for_object_props(
                salt, claim_name, self._claims[claim_name], resolved.stringify
            )
            digests.append(digest_of(disclosure, resolved.hash_alg))
            new_disclosures.append(disclosure)

        claims = {k: v for k, v in self._claims.items() if k not in claim_names}
        sd_props = SDProps(
            sd_alg=resolved.hash_alg,
            sd=(self._sd_props.sd or ()) + tuple(digests),
        )
        logger.debug("claims_redacted", redacted=len(digests), hash_alg=resolved.hash_alg)
        return SDObject(claims, sd_props, self._disclosures + tuple(new_disclosures))

    def array(
        self,
        claim_name: str,
        indices: Iterable[int] = (),
        options: OptionsLike = None,
    ) -> "SDObject":
        """Make elements of an array claim selectively disclosable.

        The digests are computed with the resolved hash algorithm, but
        ``_sd_alg`` is set to ``options.hash_alg`` as given, and removed if
        no algorithm was given. Pass the same ``hash_alg`` explicitly on every
        call when chaining array redactions with a non-default algorithm.

        Args:
            claim_name: Name of a claim with an array value
            indices: Indices of elements to make selectively disclosable
            options: Optional parameters to make disclosures and digests

        Returns:
            ``SDObject`` with selectively disclosable array elements

        Raises:
            InconsistentHashAlgorithmError: If ``options.hash_alg`` conflicts
                with the payload's ``_sd_alg``
            KeyError: If the claim is not in the payload
            TypeError: If the claim value is not an array
        """
        options = as_disclosure_options(options)
        resolved = fill_sd_options(self._sd_props, options)
        value = self._claims[claim_name]
        if not isinstance(value, (list, tuple)):
            raise TypeError(f"Claim {claim_name!r} is not an array")

        result = sd_array(value, indices, resolved)
        claims = dict(self._claims)
        claims[claim_name] = result.sd_array
        sd_props = replace(self._sd_props, sd_alg=options.hash_alg)
        return SDObject(claims, sd_props, self._disclosures + tuple(result.disclosures))

    def nested(self, claim_name: str, f: Callable[[Any], "SDObject"]) -> "SDObject":
        """Make the contents of a claim selectively disclosable individually.

        ``f`` builds an independent ``SDObject`` from the claim value. Its
        payload replaces the claim value and its disclosures are appended.
        The hash algorithms of the two levels are not compared.

        Args:
            claim_name: Name of the claim to transform
            f: Function from the claim value to an ``SDObject``

        Returns:
            ``SDObject`` with the nested claim replaced

        Raises:
            KeyError: If the claim is not in the payload
            TypeError: If ``f`` does not return an ``SDObject``
        """
        nested_obj = f(self._claims[claim_name])
        if not isinstance(nested_obj, SDObject):
            raise TypeError(f"nested expects an SDObject, got {type(nested_obj).__name__}")
        claims = dict(self._claims)
        claims[claim_name] = nested_obj.payload
        return SDObject(claims, self._sd_props, self._disclosures + nested_obj._disclosures)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SDObject):
            return NotImplemented
        return (
            self._claims == other._claims
            and self._sd_props == other._sd_props
            and self._disclosures == other._disclosures
        )

    def __repr__(self) -> str:
        return f"SDObject(payload={self.payload!r}, disclosures={list(self._disclosures)!r})"

    # Aliases
    combine = flat_map
    array_property = array
    property = prop
