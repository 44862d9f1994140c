"""Errors raised while building selectively disclosable payloads."""

from typing import Optional


class SDError(ValueError):
    """Base class for selective disclosure errors."""


class InconsistentHashAlgorithmError(SDError):
    """Two hash algorithm choices disagree.

    Raised when a payload already declares ``_sd_alg`` and a different
    algorithm is requested, or when two redacted values with different
    algorithms are combined.
    """

    def __init__(self, expected: Optional[str], actual: Optional[str], message: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f"Inconsistent hash algorithms: {expected} and {actual}."
        )


class UnsupportedHashAlgorithmError(SDError):
    """A hash algorithm has no backing implementation."""

    def __init__(self, hash_alg: str):
        self.hash_alg = hash_alg
        super().__init__(f"Unsupported hash algorithm: {hash_alg}")


class ProhibitedHashAlgorithmError(SDError):
    """A hash algorithm is known to be broken and MUST NOT be used."""

    def __init__(self, hash_alg: str):
        self.hash_alg = hash_alg
        super().__init__(
            f"Prohibited hash algorithm: {hash_alg}. The hash algorithms MD2, MD4, MD5, "
            "and SHA-1 revealed fundamental weaknesses and MUST NOT be used."
        )
