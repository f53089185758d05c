"""Membership backend clients."""

from jwt_revoker.backends.grpc_backend import GrpcMembershipBackend
from jwt_revoker.backends.protocols import MembershipBackend
from jwt_revoker.backends.redis_backend import RedisMembershipBackend
from jwt_revoker.config import Settings


async def create_backend(settings: Settings) -> MembershipBackend:
    """Connect to the configured membership backend.

    Raises ``BackendError`` when the backend cannot be reached.
    """
    if settings.backend == "redis":
        backend = RedisMembershipBackend.from_url(settings.redis_url, settings.rpc_timeout_seconds)
        try:
            await backend.verify()
        except Exception:
            await backend.close()
            raise
        return backend
    return await GrpcMembershipBackend.connect(
        settings.backend_address, settings.rpc_timeout_seconds
    )


__all__ = [
    "GrpcMembershipBackend",
    "MembershipBackend",
    "RedisMembershipBackend",
    "create_backend",
]
