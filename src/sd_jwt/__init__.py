"""SD-JWT: selectively disclosable claims, disclosures and digests."""

# Hide module imports
from . import disclosure, errors, hash, options, salt, sd_array, sd_object
from .disclosure import (
    Disclosure,
    decode_disclosure,
    digest_of,
    disclosure_for_array_element,
    disclosure_for_object_props,
)
from .errors import (
    InconsistentHashAlgorithmError,
    ProhibitedHashAlgorithmError,
    SDError,
    UnsupportedHashAlgorithmError,
)
from .hash import (
    SD_DEFAULT_HASH_ALG,
    SDHashAlg,
    hash_data,
    is_prohibited,
    is_weak,
    require_second_preimage_resistant,
    warn_if_weak,
)
from .json_utils import fancy_stringify, stringify
from .options import DisclosureOptions, ResolvedDisclosureOptions, fill_sd_options
from .salt import (
    FixedSaltGenerator,
    SaltGenerator,
    SecureSaltGenerator,
    SeededSaltGenerator,
    as_create_salt,
    create_salt,
    create_salt_async,
    default_create_salt,
)
from .sd_array import SDArrayResult, array_element_digest, is_array_element_digest
from .sd_array import sd_array as redact_array
from .sd_object import SDObject, SDProps

del disclosure, errors, hash, options, salt, sd_array, sd_object

__version__ = "0.1.0"


__all__ = [
    "__version__",
    # Redacted objects
    "SDObject",
    "SDProps",
    # Options
    "DisclosureOptions",
    "ResolvedDisclosureOptions",
    "fill_sd_options",
    # Disclosures and digests
    "Disclosure",
    "decode_disclosure",
    "digest_of",
    "disclosure_for_array_element",
    "disclosure_for_object_props",
    # Arrays
    "SDArrayResult",
    "array_element_digest",
    "is_array_element_digest",
    "redact_array",
    # Hash algorithms
    "SDHashAlg",
    "SD_DEFAULT_HASH_ALG",
    "hash_data",
    "is_prohibited",
    "is_weak",
    "require_second_preimage_resistant",
    "warn_if_weak",
    # Salt generators
    "SaltGenerator",
    "SecureSaltGenerator",
    "SeededSaltGenerator",
    "FixedSaltGenerator",
    "as_create_salt",
    "create_salt",
    "create_salt_async",
    "default_create_salt",
    # Serializers
    "stringify",
    "fancy_stringify",
    # Errors
    "SDError",
    "InconsistentHashAlgorithmError",
    "UnsupportedHashAlgorithmError",
    "ProhibitedHashAlgorithmError",
]
