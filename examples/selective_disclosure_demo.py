#!/usr/bin/env python3
"""Demo script for building a selectively disclosable payload."""

import json

from sd_jwt import SDObject, decode_disclosure, fancy_stringify
from sd_jwt.logging_config import setup_logging


def main():
    """Redact claims, array elements and nested members, then print the result."""
    setup_logging(level="WARNING")

    print("=" * 60)
    print("SD-JWT Selective Disclosure Demo")
    print("=" * 60)

    claims = {
        "iss": "https://issuer.example.com",
        "iat": 1683000000,
        "sub": "user_42",
        "given_name": "John",
        "family_name": "Doe",
        "email": "johndoe@example.com",
        "address": {
            "street_address": "123 Main St",
            "locality": "Anytown",
            "region": "Anystate",
            "country": "US",
        },
        "nationalities": ["US", "DE"],
    }

    print("Input claims:")
    print("-" * 40)
    print(json.dumps(claims, indent=2))

    options = {"hash_alg": "sha-256", "stringify": fancy_stringify}
    sd_obj = (
        SDObject.pure(claims)
        .prop(["given_name", "family_name", "email"], options)
        .array("nationalities", [0, 1], options)
        .nested(
            "address",
            lambda address: SDObject.pure(address).prop(["street_address", "locality"], options),
        )
    )

    print("\nPayload:")
    print("-" * 40)
    print(json.dumps(sd_obj.payload, indent=2))

    print(f"\nDisclosures ({len(sd_obj.disclosures)}):")
    print("-" * 40)
    for disclosure in sd_obj.disclosures:
        decoded = decode_disclosure(disclosure)
        label = decoded.claim_name if decoded.claim_name is not None else "[array element]"
        print(f"{label}: {decoded.value!r}")
        print(f"  {disclosure}")


if __name__ == "__main__":
    main()
