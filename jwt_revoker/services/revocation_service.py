"""Revocation service: sequences decode and backend calls.

Each operation is exactly one round-trip to the membership backend. Keys
are derived fresh per call and never cached; failures propagate to the
caller without retries.
"""

from jwt_revoker.backends.protocols import MembershipBackend
from jwt_revoker.core.decoder import NotificationEncoding, TokenDecoder
from jwt_revoker.core.exceptions import BackendError
from jwt_revoker.core.keys import derive_revocation_key
from jwt_revoker.utils.logging import get_logger

logger = get_logger(__name__)


class RevocationService:
    """Records and queries revoked subjects in the membership backend."""

    def __init__(self, backend: MembershipBackend, decoder: TokenDecoder):
        self.backend = backend
        self.decoder = decoder

    @property
    def claim_name(self) -> str:
        return self.decoder.claim_name

    async def revoke(self, body: bytes, encoding: NotificationEncoding) -> str:
        """Decode a logout notification and add its key to the backend.

        Returns the revocation key. A ``DecodeError`` is raised before any
        backend call is made.
        """
        key = self.decoder.decode(body, encoding)
        await self.add(key)
        return key

    async def add(self, key: str) -> None:
        """Mark *key* as revoked."""
        try:
            await self.backend.add(key.encode())
        except BackendError as exc:
            logger.warning("revocation.add_failed", key=key, reason=exc.reason.value)
            raise
        logger.info("revocation.added", key=key)

    async def is_revoked(self, token_id: str) -> bool:
        """Return whether *token_id* (a raw claim value) is possibly revoked."""
        key = derive_revocation_key(self.claim_name, token_id)
        try:
            revoked = await self.backend.check(key.encode())
        except BackendError as exc:
            logger.warning("revocation.check_failed", key=key, reason=exc.reason.value)
            raise
        logger.debug("revocation.checked", key=key, revoked=revoked)
        return revoked
