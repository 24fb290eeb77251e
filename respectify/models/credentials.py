"""Credential check result model."""

from typing import NamedTuple


class CredentialCheckResult(NamedTuple):
    """Outcome of a credential check; unpacks as ``success, info``."""

    success: bool
    info: str
