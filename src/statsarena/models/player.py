"""Canonical player models shared by the gateway and the search UI."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


NOT_AVAILABLE = "N/A"


class PlayerSummary(BaseModel):
    """Normalized, display-ready player identity."""

    id: str = Field(..., min_length=1)
    full_name: str
    first_name: str = ""
    last_name: str = ""
    position: str = NOT_AVAILABLE
    team: str = NOT_AVAILABLE
    team_id: str | None = Field(default=None, alias="teamId")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class StatAverages(BaseModel):
    points: float = 0.0
    assists: float = 0.0
    rebounds: float = 0.0

    model_config = ConfigDict(frozen=True)


class PlayerStats(BaseModel):
    """Per-game averages for one player over one season."""

    player_id: str = Field(..., alias="playerId")
    season_used: int = Field(..., alias="seasonUsed")
    team: str = NOT_AVAILABLE
    average: StatAverages = Field(default_factory=StatAverages)
    errors: dict[str, Any] | list[Any] | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)
