from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from statsarena.models import PlayerSummary


class ErrorResponse(BaseModel):
    error: str


class HintResponse(BaseModel):
    results: List[PlayerSummary] = Field(default_factory=list)
    hint: str
