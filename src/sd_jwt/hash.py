"""Hash algorithms for disclosure digests.

Algorithm names come from the "Hash Name String" column of the IANA
"Named Information Hash Algorithm" registry, which is what ``_sd_alg``
refers to. If ``_sd_alg`` is absent, ``sha-256`` is used.
"""

import hashlib
from typing import Callable, Literal

from .errors import ProhibitedHashAlgorithmError, UnsupportedHashAlgorithmError
from .logging_config import get_logger

logger = get_logger(__name__)

SDHashAlg = Literal[
    "sha-256",
    "sha-256-128",
    "sha-256-120",
    "sha-256-96",
    "sha-256-64",
    "sha-256-32",
    "sha-384",
    "sha-512",
    "sha3-224",
    "sha3-256",
    "sha3-384",
    "sha3-512",
    "blake2s-256",
    "blake2b-256",
    "blake2b-512",
    "k12-256",
    "k12-512",
]

SD_DEFAULT_HASH_ALG: SDHashAlg = "sha-256"

PROHIBITED_HASH_ALGORITHMS = frozenset({"MD2", "MD4", "MD5", "SHA-1"})
WEAK_HASH_ALGORITHMS = frozenset({"sha-256-32", "sha-256-64"})

# Registered names without a hashlib implementation
UNSUPPORTED_HASH_ALGORITHMS = frozenset({"k12-256", "k12-512"})


def _truncated_sha256(bits: int) -> Callable[[bytes], bytes]:
    # RFC 6920 truncated hashes keep the leftmost bits
    def _hash(data: bytes) -> bytes:
        return hashlib.sha256(data).digest()[: bits // 8]

    return _hash


HASH_ALGORITHMS: dict[str, Callable[[bytes], bytes]] = {
    "sha-256": lambda data: hashlib.sha256(data).digest(),
    "sha-256-128": _truncated_sha256(128),
    "sha-256-120": _truncated_sha256(120),
    "sha-256-96": _truncated_sha256(96),
    "sha-256-64": _truncated_sha256(64),
    "sha-256-32": _truncated_sha256(32),
    "sha-384": lambda data: hashlib.sha384(data).digest(),
    "sha-512": lambda data: hashlib.sha512(data).digest(),
    "sha3-224": lambda data: hashlib.sha3_224(data).digest(),
    "sha3-256": lambda data: hashlib.sha3_256(data).digest(),
    "sha3-384": lambda data: hashlib.sha3_384(data).digest(),
    "sha3-512": lambda data: hashlib.sha3_512(data).digest(),
    "blake2s-256": lambda data: hashlib.blake2s(data, digest_size=32).digest(),
    "blake2b-256": lambda data: hashlib.blake2b(data, digest_size=32).digest(),
    "blake2b-512": lambda data: hashlib.blake2b(data, digest_size=64).digest(),
}


def is_prohibited(hash_alg: str) -> bool:
    """Return True if the algorithm MUST NOT be used for digests."""
    return hash_alg.upper() in PROHIBITED_HASH_ALGORITHMS


def is_weak(hash_alg: str) -> bool:
    """Return True if the algorithm is allowed but not recommended."""
    return hash_alg in WEAK_HASH_ALGORITHMS


def warn_if_weak(hash_alg: str) -> None:
    """Log ``weak_hash_algorithm`` if the algorithm is on the weak list."""
    if is_weak(hash_alg):
        logger.warning("weak_hash_algorithm", hash_alg=hash_alg)


def require_second_preimage_resistant(hash_alg: str, warn: bool = True) -> None:
    """Check a hash algorithm against the prohibited and weak lists.

    Args:
        hash_alg: Hash algorithm name
        warn: Log the weak-algorithm advisory

    Raises:
        ProhibitedHashAlgorithmError: If the algorithm is prohibited
    """
    if is_prohibited(hash_alg):
        raise ProhibitedHashAlgorithmError(hash_alg)
    if warn:
        warn_if_weak(hash_alg)


def hash_data(data: bytes, hash_alg: str) -> bytes:
    """Hash data with the given algorithm.

    The weak-algorithm advisory is not logged here; redaction operations
    log it once when their options are resolved.

    Args:
        data: Bytes to hash
        hash_alg: Hash algorithm name

    Returns:
        Raw hash digest bytes

    Raises:
        ProhibitedHashAlgorithmError: If the algorithm is prohibited
        UnsupportedHashAlgorithmError: If the algorithm has no implementation
    """
    require_second_preimage_resistant(hash_alg, warn=False)
    try:
        hash_function = HASH_ALGORITHMS[hash_alg]
    except KeyError:
        raise UnsupportedHashAlgorithmError(hash_alg) from None
    return hash_function(data)
