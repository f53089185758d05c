"""Core decoding and key derivation."""
from jwt_revoker.core.decoder import NotificationEncoding, TokenDecoder
from jwt_revoker.core.exceptions import BackendError, DecodeError
from jwt_revoker.core.keys import derive_revocation_key

__all__ = [
    "BackendError",
    "DecodeError",
    "NotificationEncoding",
    "TokenDecoder",
    "derive_revocation_key",
]
