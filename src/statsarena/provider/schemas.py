"""Typed view of the provider payloads.

Every nested field is optional. A value of the wrong kind at any level
decodes as missing instead of failing the whole record.
"""

from __future__ import annotations

import math
from typing import Any, List

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def _mapping_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None


def _number_or_none(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    # nan and inf count as missing
    return number if math.isfinite(number) else None


def _text_or_none(value: Any) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return None


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ProviderTeam(_ProviderModel):
    id: str | None = None
    name: str | None = None

    @field_validator("id", "name", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)


def _team_or_none(value: Any) -> Any:
    # Some payloads carry the team as a bare name.
    if isinstance(value, str):
        return {"name": value}
    return _mapping_or_none(value)


class ProviderLeagueEntry(_ProviderModel):
    pos: str | None = None
    team: ProviderTeam | None = None
    team_id: str | None = Field(default=None, alias="teamId")

    @field_validator("pos", "team_id", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("team", mode="before")
    @classmethod
    def _coerce_team(cls, value: Any) -> Any:
        return _team_or_none(value)


class ProviderLeagues(_ProviderModel):
    standard: ProviderLeagueEntry | None = None

    @field_validator("standard", mode="before")
    @classmethod
    def _coerce_standard(cls, value: Any) -> Any:
        return _mapping_or_none(value)


class ProviderPlayer(_ProviderModel):
    id: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    leagues: ProviderLeagues | None = None

    @field_validator("id", "firstname", "lastname", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("leagues", mode="before")
    @classmethod
    def _coerce_leagues(cls, value: Any) -> Any:
        return _mapping_or_none(value)

    @property
    def standard(self) -> ProviderLeagueEntry | None:
        return self.leagues.standard if self.leagues else None


class ProviderGameRecord(_ProviderModel):
    team: ProviderTeam | None = None
    points: float | None = None
    assists: float | None = None
    tot_reb: float | None = Field(default=None, alias="totReb")

    @field_validator("team", mode="before")
    @classmethod
    def _coerce_team(cls, value: Any) -> Any:
        return _team_or_none(value)

    @field_validator("points", "assists", "tot_reb", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> float | None:
        return _number_or_none(value)


class ProviderEnvelope(_ProviderModel):
    """Outer ``{errors, results, response}`` wrapper shared by all endpoints."""

    errors: dict[str, Any] | List[Any] | None = None
    response: List[dict[str, Any]] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def _coerce_errors(cls, value: Any) -> Any:
        if isinstance(value, (dict, list)):
            return value
        if isinstance(value, str) and value:
            return {"message": value}
        return None

    @field_validator("response", mode="before")
    @classmethod
    def _coerce_response(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if isinstance(item, dict)]
        return value

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def players(self) -> list[ProviderPlayer]:
        return [ProviderPlayer.model_validate(item) for item in self.response]

    def games(self) -> list[ProviderGameRecord]:
        return [ProviderGameRecord.model_validate(item) for item in self.response]
