"""gRPC client for the shared membership (bloom filter) service.

Speaks the ``bloomfilter.BloomFilter`` service from ``protos/bloomfilter.proto``
through the generated stub. Keys travel as raw ``bytes`` elements.

A single ``grpc.aio`` channel is opened at startup and shared by every
request handler: the channel multiplexes concurrent calls over one HTTP/2
connection and is safe for concurrent use within the event loop, so calls
are not serialised behind a lock. Every call carries a deadline.
"""

import asyncio

import grpc
from grpc import aio as grpc_aio

from jwt_revoker.backends.generated import (  # pyright: ignore[reportMissingImports]
    bloomfilter_pb2,
    bloomfilter_pb2_grpc,
)
from jwt_revoker.core.exceptions import BackendError, BackendReason
from jwt_revoker.utils.logging import get_logger

logger = get_logger(__name__)

# Status codes that mean "could not reach the backend in time".
_CONNECTION_CODES = frozenset({grpc.StatusCode.UNAVAILABLE, grpc.StatusCode.DEADLINE_EXCEEDED})


def _translate_rpc_error(method: str, exc: grpc_aio.AioRpcError) -> BackendError:
    code = exc.code()
    reason = (
        BackendReason.CONNECTION_FAILED if code in _CONNECTION_CODES else BackendReason.REQUEST_FAILED
    )
    return BackendError(reason, f"{method} returned {code.name}: {exc.details()}")


class GrpcMembershipBackend:
    """Membership backend reached over a shared ``grpc.aio`` channel."""

    def __init__(self, channel: grpc_aio.Channel, address: str, timeout: float):
        self.address = address
        self.timeout = timeout
        self._channel = channel
        self._stub = bloomfilter_pb2_grpc.BloomFilterStub(channel)

    @classmethod
    async def connect(cls, address: str, timeout: float) -> "GrpcMembershipBackend":
        """Open a channel to *address* and wait until it is ready."""
        channel = grpc_aio.insecure_channel(address)
        backend = cls(channel, address, timeout)
        try:
            await backend.verify()
        except BackendError:
            await channel.close()
            raise
        logger.info("backend.connected", backend="grpc", address=address)
        return backend

    async def verify(self) -> None:
        """Wait for the channel to reach READY within the timeout."""
        try:
            await asyncio.wait_for(self._channel.channel_ready(), timeout=self.timeout)
        except TimeoutError as exc:
            raise BackendError(
                BackendReason.CONNECTION_FAILED,
                f"no connection to {self.address} after {self.timeout}s",
            ) from exc

    async def add(self, key: bytes) -> None:
        request = bloomfilter_pb2.AddRequest(elems=[key])  # pyright: ignore[reportAttributeAccessIssue]
        try:
            await self._stub.Add(request, timeout=self.timeout)
        except grpc_aio.AioRpcError as exc:
            raise _translate_rpc_error("Add", exc) from exc

    async def check(self, key: bytes) -> bool:
        request = bloomfilter_pb2.CheckRequest(elems=[key])  # pyright: ignore[reportAttributeAccessIssue]
        try:
            reply = await self._stub.Check(request, timeout=self.timeout)
        except grpc_aio.AioRpcError as exc:
            raise _translate_rpc_error("Check", exc) from exc

        if len(reply.checks) != 1:
            raise BackendError(
                BackendReason.REQUEST_FAILED,
                f"Check returned {len(reply.checks)} results for 1 element",
            )
        return bool(reply.checks[0])

    async def close(self) -> None:
        await self._channel.close()
        logger.info("backend.closed", backend="grpc", address=self.address)
