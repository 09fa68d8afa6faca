"""Tagged search outcome and its JSON wire encoding.

The wire keeps the historical contract: a plain array for results and a
``{"results": [], "hint": ...}`` object for the hinted empty case. The
encoding decision lives here only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union

from .player import PlayerSummary


@dataclass(frozen=True)
class SearchResults:
    players: tuple[PlayerSummary, ...] = ()


@dataclass(frozen=True)
class EmptyWithHint:
    hint: str

    @property
    def players(self) -> tuple[PlayerSummary, ...]:
        return ()


SearchOutcome = Union[SearchResults, EmptyWithHint]


def results(players: Sequence[PlayerSummary]) -> SearchResults:
    return SearchResults(players=tuple(players))


def outcome_to_payload(outcome: SearchOutcome) -> list[dict[str, Any]] | dict[str, Any]:
    if isinstance(outcome, EmptyWithHint):
        return {"results": [], "hint": outcome.hint}
    return [player.model_dump(by_alias=True) for player in outcome.players]


def outcome_from_payload(payload: Any) -> SearchOutcome:
    """Decode a ``/players`` response body.

    Raises ``ValueError`` when the body is neither shape.
    """
    if isinstance(payload, list):
        return results([PlayerSummary.model_validate(item) for item in payload])
    if isinstance(payload, dict) and isinstance(payload.get("results"), list):
        hint = payload.get("hint")
        if isinstance(hint, str) and hint:
            return EmptyWithHint(hint=hint)
        return results([PlayerSummary.model_validate(item) for item in payload["results"]])
    raise ValueError(f"Unexpected search payload: {type(payload).__name__}")
