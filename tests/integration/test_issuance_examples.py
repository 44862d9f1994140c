"""End-to-end tests against the examples of the SD-JWT draft (-07)."""

import pytest

from sd_jwt import SDObject, decode_disclosure, digest_of


@pytest.fixture
def issued(issuance_claims, fancy_options) -> SDObject:
    """The SD-JWT payload of the issuance example (section 6.1)."""
    return (
        SDObject.pure(issuance_claims)
        # The nationalities array is always visible, but its contents are selectively disclosable.
        .array("nationalities", [0], fancy_options("lklxF5jMYlGTPUovMNIvCA"))
        .array("nationalities", [1], fancy_options("nPuoQnkRFq3BIeAm7AnXFA"))
        .prop(["given_name"], fancy_options("2GLC42sKQveCfGfryNRN9w"))
        .prop(["family_name"], fancy_options("eluV5Og3gSNII8EYnsxA_A"))
        .prop(["email"], fancy_options("6Ij7tM-a5iVPGboS5tmvVA"))
        .prop(["phone_number"], fancy_options("eI8ZWm9QnKPpNPeNenHdhQ"))
        .prop(["phone_number_verified"], fancy_options("Qg_O64zqAxe412a108iroA"))
        .prop(["birthdate"], fancy_options("Pc33JM2LchcU_lHggv_ufQ"))
        .prop(["updated_at"], fancy_options("G02NSrQfjFXQ7Io09syajA"))
        # Flat structure: the address can only be disclosed in full.
        .prop(["address"], fancy_options("AJx-095VPrpTtN4QMOqROA"))
    )


class TestIssuanceExample:
    """Section 6.1: Issuance."""

    @pytest.mark.integration
    def test_disclosures_match_example(self, issued: SDObject) -> None:
        assert issued.disclosures == [
            # US
            "WyJsa2x4RjVqTVlsR1RQVW92TU5JdkNBIiwgIlVTIl0",
            # DE
            "WyJuUHVvUW5rUkZxM0JJZUFtN0FuWEZBIiwgIkRFIl0",
            # given_name
            "WyIyR0xDNDJzS1F2ZUNmR2ZyeU5STjl3IiwgImdpdmVuX25hbWUiLCAiSm9obiJd",
            # family_name
            "WyJlbHVWNU9nM2dTTklJOEVZbnN4QV9BIiwgImZhbWlseV9uYW1lIiwgIkRvZSJd",
            # email
            "WyI2SWo3dE0tYTVpVlBHYm9TNXRtdlZBIiwgImVtYWlsIiwgImpvaG5kb2VAZXhhbXBsZS5jb20iXQ",
            # phone_number
            "WyJlSThaV205UW5LUHBOUGVOZW5IZGhRIiwgInBob25lX251bWJlciIsICIrMS0yMDItNTU1LTAxMDEiXQ",
            # phone_number_verified
            "WyJRZ19PNjR6cUF4ZTQxMmExMDhpcm9BIiwgInBob25lX251bWJlcl92ZXJpZmllZCIsIHRydWVd",
            # birthdate
            "WyJQYzMzSk0yTGNoY1VfbEhnZ3ZfdWZRIiwgImJpcnRoZGF0ZSIsICIxOTQwLTAxLTAxIl0",
            # updated_at
            "WyJHMDJOU3JRZmpGWFE3SW8wOXN5YWpBIiwgInVwZGF0ZWRfYXQiLCAxNTcwMDAwMDAwXQ",
            # address
            "WyJBSngtMDk1VlBycFR0TjRRTU9xUk9BIiwgImFkZHJlc3MiLCB7InN0cmVldF9hZGRyZXNzIjogIjEyMyBNYWluIFN0IiwgImxvY2FsaXR5IjogIkFueXRvd24iLCAicmVnaW9uIjogIkFueXN0YXRlIiwgImNvdW50cnkiOiAiVVMifV0",
        ]

    @pytest.mark.integration
    def test_digests_match_example(self, issued: SDObject) -> None:
        assert sorted(issued.sd_digests) == sorted(
            [
                "CrQe7S5kqBAHt-nMYXgc6bdt2SH5aTY1sU_M-PgkjPI",
                "JzYjH4svliH0R3PyEMfeZu6Jt69u5qehZo7F7EPYlSE",
                "PorFbpKuVu6xymJagvkFsFXAbRoc2JGlAUA2BA4o7cI",
                "TGf4oLbgwd5JQaHyKVQZU9UdGE0w5rtDsrZzfUaomLo",
                "XQ_3kPKt1XyX7KANkqVR6yZ2Va5NrPIvPYbyMvRKBMM",
                "XzFrzwscM6Gn6CJDc6vVK8BkMnfG8vOSKfpPIZdAfdE",
                "gbOsI4Edq2x2Kw-w5wPEzakob9hV1cRD0ATN3oQL9JM",
                "jsu9yVulwQQlhFlM_3JlzMaSFzglhQG0DpfayQwLUK4",
            ]
        )
        assert issued.payload["nationalities"] == [
            {"...": "pFndjkZ_VCzmyTa6UjlZo3dh-ko8aIKQc9DlGzhaVYo"},
            {"...": "7Cf6JkPudry3lcbwHgeZ8khAv1U1OSlerP0VkBJrWZ0"},
        ]

    @pytest.mark.integration
    def test_payload_shape(self, issued: SDObject) -> None:
        assert issued.payload == {
            "sub": "user_42",
            "nationalities": issued.payload["nationalities"],
            "_sd": issued.sd_digests,
            "_sd_alg": "sha-256",
        }

    @pytest.mark.integration
    def test_every_digest_has_a_disclosure(self, issued: SDObject) -> None:
        """Property digests and array markers account for all disclosures."""
        digests = {digest_of(d, "sha-256"): d for d in issued.disclosures}
        markers = [element["..."] for element in issued.payload["nationalities"]]

        assert sorted(digests) == sorted(issued.sd_digests + markers)


class TestNestedDataExamples:
    """Section 7: Considerations on nested data."""

    @pytest.mark.integration
    def test_flat(self, address_claims, fancy_options) -> None:
        """Section 7.1: the address is disclosed as a whole."""
        sd_obj = SDObject.pure(address_claims).prop(["address"], fancy_options("2GLC42sKQveCfGfryNRN9w"))

        assert sd_obj.disclosures == [
            "WyIyR0xDNDJzS1F2ZUNmR2ZyeU5STjl3IiwgImFkZHJlc3MiLCB7InN0cmVldF9hZGRyZXNzIjogIlNjaHVsc3RyLiAxMiIsICJsb2NhbGl0eSI6ICJTY2h1bHBmb3J0YSIsICJyZWdpb24iOiAiU2FjaHNlbi1BbmhhbHQiLCAiY291bnRyeSI6ICJERSJ9XQ"
        ]
        assert sd_obj.sd_digests == ["fOBUSQvo46yQO-wRwXBcGqvnbKIueISEL961_Sjd4do"]

    @pytest.mark.integration
    def test_structured(self, address_claims, fancy_options) -> None:
        """Section 7.2: address members are disclosable individually."""
        sd_obj = SDObject.pure(address_claims).nested(
            "address",
            lambda address: SDObject.pure(address)
            .prop(["street_address"], fancy_options("2GLC42sKQveCfGfryNRN9w"))
            .prop(["locality"], fancy_options("eluV5Og3gSNII8EYnsxA_A"))
            .prop(["region"], fancy_options("6Ij7tM-a5iVPGboS5tmvVA"))
            .prop(["country"], fancy_options("eI8ZWm9QnKPpNPeNenHdhQ")),
        )

        assert sd_obj.disclosures == [
            # street_address
            "WyIyR0xDNDJzS1F2ZUNmR2ZyeU5STjl3IiwgInN0cmVldF9hZGRyZXNzIiwgIlNjaHVsc3RyLiAxMiJd",
            # locality
            "WyJlbHVWNU9nM2dTTklJOEVZbnN4QV9BIiwgImxvY2FsaXR5IiwgIlNjaHVscGZvcnRhIl0",
            # region
            "WyI2SWo3dE0tYTVpVlBHYm9TNXRtdlZBIiwgInJlZ2lvbiIsICJTYWNoc2VuLUFuaGFsdCJd",
            # country
            "WyJlSThaV205UW5LUHBOUGVOZW5IZGhRIiwgImNvdW50cnkiLCAiREUiXQ",
        ]
        assert sorted(sd_obj.payload["address"]["_sd"]) == [
            "6vh9bq-zS4GKM_7GpggVbYzzu6oOGXrmNVGPHP75Ud0",
            "9gjVuXtdFROCgRrtNcGUXmF65rdezi_6Er_j76kmYyM",
            "KURDPh4ZC19-3tiz-Df39V8eidy1oV3a3H1Da2N0g88",
            "WN9r9dCBJ8HTCsS2jKASxTjEyW5m5x65_Z_2ro2jfXM",
        ]
        assert sd_obj.payload["sub"] == address_claims["sub"]
        assert sd_obj.sd_digests == []

    @pytest.mark.integration
    def test_recursive(self, address_claims, fancy_options, recursive_stringify) -> None:
        """Section 7.3: the redacted address is itself made disclosable."""
        sd_obj = (
            SDObject.pure(address_claims)
            .nested(
                "address",
                lambda address: SDObject.pure(address)
                .prop(["street_address"], fancy_options("2GLC42sKQveCfGfryNRN9w"))
                .prop(["locality"], fancy_options("eluV5Og3gSNII8EYnsxA_A"))
                .prop(["region"], fancy_options("6Ij7tM-a5iVPGboS5tmvVA"))
                .prop(["country"], fancy_options("eI8ZWm9QnKPpNPeNenHdhQ")),
            )
            .prop(
                ["address"],
                fancy_options("Qg_O64zqAxe412a108iroA", stringify=recursive_stringify),
            )
        )

        assert len(sd_obj.disclosures) == 5
        assert sd_obj.disclosures[4] == (
            "WyJRZ19PNjR6cUF4ZTQxMmExMDhpcm9BIiwgImFkZHJlc3MiLCB7Il9zZCI6IFsiNnZoOWJxLXpTNEdLTV83R3BnZ1ZiWXp6dTZvT0dYcm1OVkdQSFA3NVVkMCIsICI5Z2pWdVh0ZEZST0NnUnJ0TmNHVVhtRjY1cmRlemlfNkVyX2o3NmttWXlNIiwgIktVUkRQaDRaQzE5LTN0aXotRGYzOVY4ZWlkeTFvVjNhM0gxRGEyTjBnODgiLCAiV045cjlkQ0JKOEhUQ3NTMmpLQVN4VGpFeVc1bTV4NjVfWl8ycm8yamZYTSJdfV0"
        )

        inner_digests = [digest_of(d, "sha-256") for d in sd_obj.disclosures[:4]]
        outer = decode_disclosure(sd_obj.disclosures[4])
        assert outer.claim_name == "address"
        assert sorted(outer.value["_sd"]) == sorted(inner_digests)
        assert sd_obj.payload == {
            "sub": address_claims["sub"],
            "_sd": [digest_of(sd_obj.disclosures[4], "sha-256")],
            "_sd_alg": "sha-256",
        }
