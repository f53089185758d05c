"""Unit tests for core/decoder.py: logout notification decoding."""

import pytest

from jwt_revoker.core.decoder import (
    NotificationEncoding,
    TokenDecoder,
    UnverifiedClaimsReader,
    VerifiedClaimsReader,
    encoding_for_content_type,
    extract_logout_token,
)
from jwt_revoker.core.exceptions import DecodeError, DecodeReason
from jwt_revoker.core.keys import derive_revocation_key
from tests.helpers.token_factory import (
    TEST_ALGORITHM,
    TEST_SIGNING_KEY,
    create_logout_token,
    form_body,
    json_body,
)

FORM = NotificationEncoding.FORM
JSON = NotificationEncoding.JSON


class TestDeriveRevocationKey:
    """Key derivation is the one identity both paths share."""

    def test_concatenates_claim_name_and_value(self):
        assert derive_revocation_key("sid", "abc123") == "sid-abc123"

    def test_is_deterministic(self):
        assert derive_revocation_key("sid", "x-y") == derive_revocation_key("sid", "x-y")

    def test_claim_name_distinguishes_keys(self):
        assert derive_revocation_key("sid", "1") != derive_revocation_key("sub", "1")


class TestEncodingForContentType:
    @pytest.mark.parametrize(
        "content_type",
        ["application/json", "application/json; charset=utf-8", "application/jwt+json"],
    )
    def test_json_types(self, content_type):
        assert encoding_for_content_type(content_type) is JSON

    @pytest.mark.parametrize(
        "content_type", ["application/x-www-form-urlencoded", "text/plain", "", None]
    )
    def test_everything_else_is_form(self, content_type):
        assert encoding_for_content_type(content_type) is FORM


class TestExtractLogoutTokenForm:
    def test_returns_token(self):
        assert extract_logout_token(b"logout_token=a.b.c", FORM) == "a.b.c"

    def test_url_encoded_value_is_unquoted(self):
        assert extract_logout_token(b"logout_token=a%2Eb.c", FORM) == "a.b.c"

    def test_ignores_other_fields(self):
        assert extract_logout_token(b"state=1&logout_token=a.b.c", FORM) == "a.b.c"

    def test_no_equals_sign_is_malformed(self):
        with pytest.raises(DecodeError) as exc_info:
            extract_logout_token(b"a.b.c", FORM)
        assert exc_info.value.reason is DecodeReason.MALFORMED_BODY

    def test_missing_field_is_malformed(self):
        with pytest.raises(DecodeError) as exc_info:
            extract_logout_token(b"token=a.b.c", FORM)
        assert exc_info.value.reason is DecodeReason.MALFORMED_BODY

    def test_repeated_field_is_malformed(self):
        with pytest.raises(DecodeError) as exc_info:
            extract_logout_token(b"logout_token=a.b.c&logout_token=d.e.f", FORM)
        assert exc_info.value.reason is DecodeReason.MALFORMED_BODY

    def test_non_utf8_body_is_malformed(self):
        with pytest.raises(DecodeError) as exc_info:
            extract_logout_token(b"logout_token=\xff\xfe", FORM)
        assert exc_info.value.reason is DecodeReason.MALFORMED_BODY


class TestExtractLogoutTokenJson:
    def test_returns_token(self):
        assert extract_logout_token(b'{"logout_token": "a.b.c"}', JSON) == "a.b.c"

    @pytest.mark.parametrize(
        "body",
        [
            b"{}",
            b'{"token": "a.b.c"}',
            b'{"logout_token": 42}',
            b'{"logout_token": null}',
            b'["a.b.c"]',
            b"not json",
            b"",
            b'{"logout_token": "a.b.c", "n": ' + b"1" * 5000 + b"}",
            b"[" * 100000 + b"]" * 100000,
        ],
        ids=[
            "empty-object",
            "wrong-field",
            "int-token",
            "null-token",
            "array",
            "not-json",
            "empty",
            "huge-integer",
            "deep-nesting",
        ],
    )
    def test_unusable_body_is_malformed(self, body):
        with pytest.raises(DecodeError) as exc_info:
            extract_logout_token(body, JSON)
        assert exc_info.value.reason is DecodeReason.MALFORMED_BODY


class TestUnverifiedClaimsReader:
    def test_reads_claims_without_key(self):
        token = create_logout_token(sid="abc123", key="some-other-key")
        claims = UnverifiedClaimsReader().read_claims(token)
        assert claims["sid"] == "abc123"

    @pytest.mark.parametrize("token", ["", "a.b", "a.b.c.d", "no-dots"])
    def test_wrong_segment_count_is_invalid(self, token):
        with pytest.raises(DecodeError) as exc_info:
            UnverifiedClaimsReader().read_claims(token)
        assert exc_info.value.reason is DecodeReason.INVALID_TOKEN

    def test_garbage_segments_are_invalid(self):
        with pytest.raises(DecodeError) as exc_info:
            UnverifiedClaimsReader().read_claims("!!!.@@@.###")
        assert exc_info.value.reason is DecodeReason.INVALID_TOKEN


class TestVerifiedClaimsReader:
    def test_accepts_correctly_signed_token(self):
        reader = VerifiedClaimsReader(TEST_SIGNING_KEY, [TEST_ALGORITHM])
        claims = reader.read_claims(create_logout_token(sid="abc123"))
        assert claims["sid"] == "abc123"

    def test_rejects_wrong_signature(self):
        reader = VerifiedClaimsReader(TEST_SIGNING_KEY, [TEST_ALGORITHM])
        token = create_logout_token(key="attacker-key")
        with pytest.raises(DecodeError) as exc_info:
            reader.read_claims(token)
        assert exc_info.value.reason is DecodeReason.INVALID_TOKEN

    def test_checks_audience_when_configured(self):
        reader = VerifiedClaimsReader(TEST_SIGNING_KEY, [TEST_ALGORITHM], audience="other")
        with pytest.raises(DecodeError) as exc_info:
            reader.read_claims(create_logout_token())
        assert exc_info.value.reason is DecodeReason.INVALID_TOKEN

    def test_checks_issuer_when_configured(self):
        reader = VerifiedClaimsReader(
            TEST_SIGNING_KEY, [TEST_ALGORITHM], audience="gateway", issuer="https://idp.test"
        )
        assert reader.read_claims(create_logout_token(sid="s1"))["sid"] == "s1"


class TestTokenDecoder:
    @pytest.fixture
    def decoder(self):
        return TokenDecoder("sid")

    def test_form_notification_to_key(self, decoder):
        body = form_body(create_logout_token(sid="abc123"))
        assert decoder.decode(body, FORM) == "sid-abc123"

    def test_json_notification_to_key(self, decoder):
        body = json_body(create_logout_token(sid="abc123"))
        assert decoder.decode(body, JSON) == "sid-abc123"

    def test_form_and_json_agree(self, decoder):
        token = create_logout_token(sid="same")
        assert decoder.decode(form_body(token), FORM) == decoder.decode(json_body(token), JSON)

    def test_configured_claim_is_used(self):
        decoder = TokenDecoder("sub")
        body = form_body(create_logout_token(sub="user-42"))
        assert decoder.decode(body, FORM) == "sub-user-42"

    def test_missing_claim(self, decoder):
        body = form_body(create_logout_token(sid=None))
        with pytest.raises(DecodeError) as exc_info:
            decoder.decode(body, FORM)
        assert exc_info.value.reason is DecodeReason.CLAIM_MISSING

    @pytest.mark.parametrize("value", [123, True, ["a"], {"k": "v"}])
    def test_non_string_claim(self, decoder, value):
        body = form_body(create_logout_token(sid=value))
        with pytest.raises(DecodeError) as exc_info:
            decoder.decode(body, FORM)
        assert exc_info.value.reason is DecodeReason.CLAIM_TYPE_MISMATCH

    def test_null_claim_is_type_mismatch(self):
        decoder = TokenDecoder("org")
        token = create_logout_token(org=None)
        with pytest.raises(DecodeError) as exc_info:
            decoder.decode_token(token)
        assert exc_info.value.reason is DecodeReason.CLAIM_TYPE_MISMATCH

    def test_error_message_names_stage(self, decoder):
        with pytest.raises(DecodeError) as exc_info:
            decoder.decode(b"garbage", FORM)
        assert "reading logout notification body" in exc_info.value.message
