"""Revocation key derivation, shared by the add and check paths."""


def derive_revocation_key(claim_name: str, claim_value: str) -> str:
    """Return the membership key for *claim_value*, e.g. ``sid-abc123``."""
    return f"{claim_name}-{claim_value}"
