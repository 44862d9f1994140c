"""Pytest configuration and shared fixtures for SD-JWT tests."""

import os
from typing import Any, Callable, Dict

import pytest
from structlog.testing import capture_logs

from sd_jwt import fancy_stringify
from sd_jwt.json_utils import b64url_decode


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_create_salt() -> Callable[[str], Callable[[], bytes]]:
    """Return a factory for ``create_salt`` functions replaying a base64url salt."""

    def factory(base64url_salt: str) -> Callable[[], bytes]:
        return lambda: b64url_decode(base64url_salt)

    return factory


@pytest.fixture
def fancy_options(mock_create_salt) -> Callable[[str], Dict[str, Any]]:
    """Return a factory for options matching the draft's example format."""

    def factory(base64url_salt: str, **extra: Any) -> Dict[str, Any]:
        return {
            "create_salt": mock_create_salt(base64url_salt),
            "stringify": fancy_stringify,
            **extra,
        }

    return factory


@pytest.fixture
def recursive_stringify() -> Callable[[Any], str]:
    """Serializer used by the recursive disclosure example.

    Drops ``_sd_alg`` and sorts ``_sd`` at every level before serializing.
    """

    def prepare(value: Any) -> Any:
        if isinstance(value, dict):
            return {
                key: sorted(item) if key == "_sd" else prepare(item)
                for key, item in value.items()
                if key != "_sd_alg"
            }
        if isinstance(value, list):
            return [prepare(item) for item in value]
        return value

    return lambda value: fancy_stringify(prepare(value))


@pytest.fixture
def issuance_claims() -> Dict[str, Any]:
    """Input claim set of the issuance example."""
    return {
        "sub": "user_42",
        "given_name": "John",
        "family_name": "Doe",
        "email": "johndoe@example.com",
        "phone_number": "+1-202-555-0101",
        "phone_number_verified": True,
        "address": {
            "street_address": "123 Main St",
            "locality": "Anytown",
            "region": "Anystate",
            "country": "US",
        },
        "birthdate": "1940-01-01",
        "updated_at": 1570000000,
        "nationalities": ["US", "DE"],
    }


@pytest.fixture
def address_claims() -> Dict[str, Any]:
    """Input claim set of the nested data examples."""
    return {
        "sub": "6c5c0a49-b589-431d-bae7-219122a9ec2c",
        "address": {
            "street_address": "Schulstr. 12",
            "locality": "Schulpforta",
            "region": "Sachsen-Anhalt",
            "country": "DE",
        },
    }


@pytest.fixture
def sample_claims() -> Dict[str, Any]:
    """Provide sample JWT claims for testing."""
    return {
        "iss": "https://issuer.example.com",
        "sub": "user123",
        "iat": 1683000000,
        "given_name": "John",
        "family_name": "Doe",
        "email": "john.doe@example.com",
        "roles": ["user", "admin", "auditor"],
        "address": {
            "street": "123 Main St",
            "city": "Anytown",
            "country": "US",
        },
    }


@pytest.fixture
def log_output():
    """Capture structlog events emitted during a test."""
    with capture_logs() as logs:
        yield logs
