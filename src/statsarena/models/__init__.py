"""Domain models exposed by the gateway and consumed by the UI."""

from .player import NOT_AVAILABLE, PlayerStats, PlayerSummary, StatAverages
from .search import (
    EmptyWithHint,
    SearchOutcome,
    SearchResults,
    outcome_from_payload,
    outcome_to_payload,
    results,
)

__all__ = [
    "NOT_AVAILABLE",
    "PlayerStats",
    "PlayerSummary",
    "StatAverages",
    "EmptyWithHint",
    "SearchOutcome",
    "SearchResults",
    "outcome_from_payload",
    "outcome_to_payload",
    "results",
]
