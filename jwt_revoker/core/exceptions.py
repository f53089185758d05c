"""Error taxonomy for the revocation pipeline.

``DecodeError`` means the caller-supplied notification is unusable;
``BackendError`` means the membership backend is unreachable or rejected
the call. Neither is retried inside the service.
"""

from enum import StrEnum


class DecodeReason(StrEnum):
    """Stage at which a logout notification failed to decode."""

    MALFORMED_BODY = "malformed_body"
    INVALID_TOKEN = "invalid_token"
    CLAIM_MISSING = "claim_missing"
    CLAIM_TYPE_MISMATCH = "claim_type_mismatch"


class BackendReason(StrEnum):
    """Kind of membership backend failure."""

    CONNECTION_FAILED = "connection_failed"
    REQUEST_FAILED = "request_failed"


_DECODE_STAGES: dict[DecodeReason, str] = {
    DecodeReason.MALFORMED_BODY: "reading logout notification body",
    DecodeReason.INVALID_TOKEN: "parsing logout token",
    DecodeReason.CLAIM_MISSING: "looking up subject claim",
    DecodeReason.CLAIM_TYPE_MISMATCH: "reading subject claim value",
}


class RevocationError(Exception):
    """Base class for all revocation pipeline errors."""

    def __init__(self, reason: StrEnum, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.reason.value}: {self.detail}" if self.detail else self.reason.value


class DecodeError(RevocationError):
    """The logout notification could not be turned into a revocation key."""

    reason: DecodeReason

    def __init__(self, reason: DecodeReason, detail: str = "") -> None:
        super().__init__(reason, detail)

    @property
    def stage(self) -> str:
        return _DECODE_STAGES[self.reason]

    @property
    def message(self) -> str:
        base = f"Failed while {self.stage}"
        return f"{base}: {self.detail}" if self.detail else base


class BackendError(RevocationError):
    """The membership backend failed to serve an add or check."""

    reason: BackendReason

    def __init__(self, reason: BackendReason, detail: str = "") -> None:
        super().__init__(reason, detail)

    @property
    def message(self) -> str:
        if self.reason is BackendReason.CONNECTION_FAILED:
            base = "Membership backend unavailable"
        else:
            base = "Membership backend rejected the request"
        return f"{base}: {self.detail}" if self.detail else base
