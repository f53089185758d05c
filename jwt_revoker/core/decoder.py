"""Logout notification decoding.

Turns the body of a back-channel logout request into a revocation key:

1. pull the ``logout_token`` out of a form- or JSON-encoded body,
2. read the token's claim set (unverified by default, see below),
3. take the configured subject claim and derive the key from it.

Signature verification is a pluggable ``ClaimsReader``. The default reader
trusts the claim set as-is because the service sits behind an
authenticated back channel; ``VerifiedClaimsReader`` can be swapped in
without touching key derivation.
"""

import json
from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Protocol
from urllib.parse import parse_qs

from jose import JWTError, jwt

from jwt_revoker.core.exceptions import DecodeError, DecodeReason
from jwt_revoker.core.keys import derive_revocation_key

LOGOUT_TOKEN_FIELD = "logout_token"


class NotificationEncoding(StrEnum):
    """Wire encoding of a logout notification body."""

    FORM = "form"
    JSON = "json"


def encoding_for_content_type(content_type: str | None) -> NotificationEncoding:
    """Pick the body encoding from a ``Content-Type`` header value."""
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type == "application/json" or media_type.endswith("+json"):
        return NotificationEncoding.JSON
    return NotificationEncoding.FORM


def _extract_from_form(text: str) -> str:
    if "=" not in text:
        raise DecodeError(DecodeReason.MALFORMED_BODY, "expected logout_token=<token>")
    values = parse_qs(text, keep_blank_values=True).get(LOGOUT_TOKEN_FIELD, [])
    if len(values) != 1:
        raise DecodeError(
            DecodeReason.MALFORMED_BODY,
            f"expected exactly one {LOGOUT_TOKEN_FIELD} field, got {len(values)}",
        )
    return values[0]


def _extract_from_json(text: str) -> str:
    try:
        document = json.loads(text)
    # JSONDecodeError, oversized integers and excessive nesting
    except (ValueError, RecursionError) as exc:
        raise DecodeError(DecodeReason.MALFORMED_BODY, "body is not valid JSON") from exc
    if not isinstance(document, dict) or LOGOUT_TOKEN_FIELD not in document:
        raise DecodeError(DecodeReason.MALFORMED_BODY, f"missing {LOGOUT_TOKEN_FIELD} field")
    token = document[LOGOUT_TOKEN_FIELD]
    if not isinstance(token, str):
        raise DecodeError(DecodeReason.MALFORMED_BODY, f"{LOGOUT_TOKEN_FIELD} must be a string")
    return token


def extract_logout_token(body: bytes, encoding: NotificationEncoding) -> str:
    """Return the raw logout token carried by *body*."""
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(DecodeReason.MALFORMED_BODY, "body is not UTF-8") from exc

    if encoding is NotificationEncoding.JSON:
        return _extract_from_json(text)
    return _extract_from_form(text)


# ---------------------------------------------------------------------------
# Claim readers
# ---------------------------------------------------------------------------


class ClaimsReader(Protocol):
    """Reads the claim set of a logout token."""

    def read_claims(self, token: str) -> Mapping[str, Any]: ...


def _require_three_segments(token: str) -> None:
    if token.count(".") != 2:
        raise DecodeError(
            DecodeReason.INVALID_TOKEN,
            f"expected 3 segments, got {token.count('.') + 1}",
        )


class UnverifiedClaimsReader:
    """Parses the claim set without checking the signature."""

    def read_claims(self, token: str) -> Mapping[str, Any]:
        _require_three_segments(token)
        try:
            return jwt.get_unverified_claims(token)
        except JWTError as exc:
            raise DecodeError(DecodeReason.INVALID_TOKEN, str(exc)) from exc


class VerifiedClaimsReader:
    """Verifies the signature (and audience/issuer when given) before reading claims."""

    def __init__(
        self,
        key: str,
        algorithms: list[str],
        audience: str | None = None,
        issuer: str | None = None,
    ) -> None:
        self.key = key
        self.algorithms = algorithms
        self.audience = audience
        self.issuer = issuer

    def read_claims(self, token: str) -> Mapping[str, Any]:
        _require_three_segments(token)
        try:
            return jwt.decode(
                token,
                self.key,
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.issuer,
                options={"verify_aud": self.audience is not None},
            )
        except JWTError as exc:
            raise DecodeError(DecodeReason.INVALID_TOKEN, str(exc)) from exc


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------


class TokenDecoder:
    """Derives a revocation key from a logout notification. Pure; no I/O."""

    def __init__(self, claim_name: str, claims_reader: ClaimsReader | None = None):
        self.claim_name = claim_name
        self.claims_reader = claims_reader or UnverifiedClaimsReader()

    def claim_value(self, claims: Mapping[str, Any]) -> str:
        """Return the configured subject claim as a string."""
        if self.claim_name not in claims:
            raise DecodeError(DecodeReason.CLAIM_MISSING, f"no '{self.claim_name}' claim")
        value = claims[self.claim_name]
        if not isinstance(value, str):
            raise DecodeError(
                DecodeReason.CLAIM_TYPE_MISMATCH,
                f"'{self.claim_name}' is {type(value).__name__}, expected string",
            )
        return value

    def decode_token(self, token: str) -> str:
        """Return the revocation key for a raw logout token."""
        claims = self.claims_reader.read_claims(token)
        return derive_revocation_key(self.claim_name, self.claim_value(claims))

    def decode(self, body: bytes, encoding: NotificationEncoding) -> str:
        """Return the revocation key for a full notification body."""
        return self.decode_token(extract_logout_token(body, encoding))
