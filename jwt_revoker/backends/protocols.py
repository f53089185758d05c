"""Protocol definition for the membership backend.

The backend is a shared, possibly probabilistic set of revoked keys.
``check`` returning ``True`` means "possibly revoked"; ``False`` means the
key was never added.
"""

from typing import Protocol


class MembershipBackend(Protocol):
    """Interface the revocation service needs from the membership store."""

    async def add(self, key: bytes) -> None: ...

    async def check(self, key: bytes) -> bool: ...

    async def verify(self) -> None: ...

    async def close(self) -> None: ...
