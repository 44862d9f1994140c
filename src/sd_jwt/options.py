"""Options for making disclosures and digests."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from . import json_utils
from .errors import InconsistentHashAlgorithmError
from .hash import SD_DEFAULT_HASH_ALG, warn_if_weak
from .salt import default_create_salt

if TYPE_CHECKING:
    from .sd_object import SDProps

SDCreateSalt = Callable[[], bytes]
SDStringify = Callable[[Any], str]


@dataclass(frozen=True)
class DisclosureOptions:
    """Optional parameters for redaction operations.

    Attributes:
        hash_alg: Hash algorithm name (default ``sha-256``)
        create_salt: Function returning a new salt (default 32 random bytes)
        stringify: Serializer for disclosure arrays (default compact JSON)
    """

    hash_alg: Optional[str] = None
    create_salt: Optional[SDCreateSalt] = None
    stringify: Optional[SDStringify] = None


@dataclass(frozen=True)
class ResolvedDisclosureOptions:
    """Disclosure options with every field filled in."""

    hash_alg: str
    create_salt: SDCreateSalt
    stringify: SDStringify


OptionsLike = Union[DisclosureOptions, Mapping[str, Any], None]


def as_disclosure_options(options: OptionsLike) -> DisclosureOptions:
    """Coerce ``None`` or a mapping into ``DisclosureOptions``.

    Raises:
        TypeError: If a mapping has keys other than the option names
    """
    if options is None:
        return DisclosureOptions()
    if isinstance(options, DisclosureOptions):
        return options
    allowed = {f.name for f in fields(DisclosureOptions)}
    unknown = set(options) - allowed
    if unknown:
        raise TypeError(f"Unknown disclosure options: {', '.join(sorted(unknown))}")
    return DisclosureOptions(**options)


def fill_sd_options(sd_props: "SDProps", options: OptionsLike = None) -> ResolvedDisclosureOptions:
    """Fill options from the payload, the caller, or defaults.

    The payload's ``_sd_alg`` wins over the caller's ``hash_alg``, which
    wins over ``sha-256``.

    Args:
        sd_props: Redaction metadata of the current payload
        options: Caller options

    Returns:
        Fully populated options

    Raises:
        InconsistentHashAlgorithmError: If the payload and the caller declare
            different algorithms
    """
    options = as_disclosure_options(options)
    payload_hash_alg = sd_props.sd_alg
    option_hash_alg = options.hash_alg
    if (
        payload_hash_alg is not None
        and option_hash_alg is not None
        and payload_hash_alg != option_hash_alg
    ):
        raise InconsistentHashAlgorithmError(
            payload_hash_alg,
            option_hash_alg,
            f"Inconsistent hash algorithms. It is {payload_hash_alg} in the given payload "
            f"but {option_hash_alg} is specified by the option.",
        )
    if payload_hash_alg is not None:
        hash_alg = payload_hash_alg
    elif option_hash_alg is not None:
        hash_alg = option_hash_alg
    else:
        hash_alg = SD_DEFAULT_HASH_ALG
    warn_if_weak(hash_alg)
    return ResolvedDisclosureOptions(
        hash_alg=hash_alg,
        create_salt=options.create_salt or default_create_salt,
        stringify=options.stringify or json_utils.stringify,
    )
