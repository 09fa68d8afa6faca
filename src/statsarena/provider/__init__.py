"""Adapters for the external statistics provider."""

from .client import ProviderClient, ProviderError
from .schemas import ProviderEnvelope, ProviderGameRecord, ProviderPlayer, ProviderTeam

__all__ = [
    "ProviderClient",
    "ProviderError",
    "ProviderEnvelope",
    "ProviderGameRecord",
    "ProviderPlayer",
    "ProviderTeam",
]
