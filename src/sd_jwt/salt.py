"""Salt generation for disclosures.

The RECOMMENDED minimum length of the randomly-generated portion of the
salt is 128 bits. Shorter salts are allowed but logged.
"""

import asyncio
import random
import secrets
from collections.abc import Iterable
from typing import Callable, Protocol

from .config import settings
from .logging_config import get_logger

logger = get_logger(__name__)

SD_DEFAULT_BYTES_OF_SALT = 32
SD_MIN_RECOMMENDED_BYTES_OF_SALT = 16


class SaltGenerator(Protocol):
    """Anything that can produce salt bytes of a requested length."""

    def generate_salt(self, length: int = SD_DEFAULT_BYTES_OF_SALT) -> bytes:
        ...


class SecureSaltGenerator:
    """Salts from ``secrets``; the source behind ``default_create_salt``."""

    def generate_salt(self, length: int = SD_DEFAULT_BYTES_OF_SALT) -> bytes:
        return create_salt(length)


class SeededSaltGenerator:
    """Reproducible salts from a seeded ``random.Random``.

    Not suitable for issuing real credentials. Use it for fixtures and
    examples whose disclosures must not change between runs.
    """

    def __init__(self, seed: int = 42):
        self._random = random.Random(seed)

    def generate_salt(self, length: int = SD_DEFAULT_BYTES_OF_SALT) -> bytes:
        inspect_size_of_salt(length)
        return self._random.randbytes(length)


class FixedSaltGenerator:
    """Replays a fixed sequence of salts, e.g. the ones from a worked example.

    The requested length is ignored. Raises ``ValueError`` once the
    sequence is exhausted.
    """

    def __init__(self, salts: Iterable[bytes]):
        self._salts = iter(list(salts))

    def generate_salt(self, length: int = SD_DEFAULT_BYTES_OF_SALT) -> bytes:
        try:
            return next(self._salts)
        except StopIteration:
            raise ValueError("FixedSaltGenerator has no salts left") from None


def inspect_size_of_salt(bytes_of_salt: int) -> int:
    """Check a salt length against the recommended minimum.

    Args:
        bytes_of_salt: Salt length in bytes

    Returns:
        The same length

    Raises:
        ValueError: If the length is negative
    """
    if bytes_of_salt < 0:
        raise ValueError(f"Salt length must not be negative, got {bytes_of_salt}")
    if bytes_of_salt < SD_MIN_RECOMMENDED_BYTES_OF_SALT:
        logger.warning(
            "short_salt",
            bytes_of_salt=bytes_of_salt,
            recommended_min_bytes=SD_MIN_RECOMMENDED_BYTES_OF_SALT,
        )
    return bytes_of_salt


def create_salt(bytes_of_salt: int) -> bytes:
    """Create a random salt of the given length.

    Args:
        bytes_of_salt: Salt length in bytes

    Returns:
        Cryptographically secure random salt bytes
    """
    inspect_size_of_salt(bytes_of_salt)
    return secrets.token_bytes(bytes_of_salt)


async def create_salt_async(bytes_of_salt: int) -> bytes:
    """Create a random salt without blocking the event loop."""
    inspect_size_of_salt(bytes_of_salt)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, secrets.token_bytes, bytes_of_salt)


_default_salt_generator = SecureSaltGenerator()


def default_create_salt() -> bytes:
    """Create a salt with the configured default length."""
    return _default_salt_generator.generate_salt(settings.salt_bytes)


def as_create_salt(
    salt_generator: SaltGenerator, length: int = SD_DEFAULT_BYTES_OF_SALT
) -> Callable[[], bytes]:
    """Adapt a salt generator to the zero-argument ``create_salt`` option.

    Args:
        salt_generator: Any object implementing ``SaltGenerator``
        length: Salt length passed on every call

    Returns:
        Function returning a new salt on each call
    """
    return lambda: salt_generator.generate_salt(length)
