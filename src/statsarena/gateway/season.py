"""Season start-year resolution."""

from __future__ import annotations

from datetime import date

SEASON_ROLLOVER_MONTH = 10


def current_season(today: date | None = None) -> int:
    """Year in which the season running on ``today`` began (October rollover)."""
    today = today or date.today()
    if today.month >= SEASON_ROLLOVER_MONTH:
        return today.year
    return today.year - 1


def resolve_season(season: int | str | None = None, *, today: date | None = None) -> int:
    if isinstance(season, int) and not isinstance(season, bool):
        return season
    if isinstance(season, str):
        text = season.strip()
        if text.isascii() and text.isdigit():
            return int(text)
    return current_season(today)
