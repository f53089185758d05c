"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request

from jwt_revoker.backends.protocols import MembershipBackend
from jwt_revoker.config import Settings, get_settings
from jwt_revoker.core.decoder import (
    ClaimsReader,
    NotificationEncoding,
    TokenDecoder,
    UnverifiedClaimsReader,
    VerifiedClaimsReader,
    encoding_for_content_type,
)
from jwt_revoker.services.revocation_service import RevocationService

# ---------------------------------------------------------------------------
# Builders: used by the lifespan and by tests
# ---------------------------------------------------------------------------


def create_claims_reader(settings: Settings) -> ClaimsReader:
    """Pick the claim reader according to the verification settings."""
    key = settings.jwt_verification_key
    # Settings rejects verification without a key
    if settings.jwt_verify_signature and key:
        return VerifiedClaimsReader(
            key,
            settings.jwt_algorithms,
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    return UnverifiedClaimsReader()


def create_decoder(settings: Settings) -> TokenDecoder:
    """Create the token decoder for the configured claim."""
    return TokenDecoder(settings.jwt_claim, create_claims_reader(settings))


# ---------------------------------------------------------------------------
# FastAPI dependencies: pull resources from app.state (set in lifespan)
# ---------------------------------------------------------------------------


def get_backend(request: Request) -> MembershipBackend:
    """Dependency that provides the shared membership backend."""
    return request.app.state.backend


def get_revocation_service(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> RevocationService:
    """Build a per-request service around the shared backend."""
    return RevocationService(get_backend(request), create_decoder(settings))


def get_notification_encoding(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> NotificationEncoding:
    """Resolve the body encoding for ``POST /add``."""
    if settings.notification_encoding == "auto":
        return encoding_for_content_type(request.headers.get("content-type"))
    return NotificationEncoding(settings.notification_encoding)


# ---------------------------------------------------------------------------
# Type aliases for cleaner dependency injection
# ---------------------------------------------------------------------------
Backend = Annotated[MembershipBackend, Depends(get_backend)]
RevocationSvc = Annotated[RevocationService, Depends(get_revocation_service)]
Encoding = Annotated[NotificationEncoding, Depends(get_notification_encoding)]
