"""Back-channel logout revocation gateway."""

__version__ = "1.0.0"
