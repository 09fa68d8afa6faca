"""Per-game averages for a single player season."""

from __future__ import annotations

import math
from datetime import date
from typing import Sequence

from statsarena.models import NOT_AVAILABLE, PlayerStats, StatAverages
from statsarena.provider import ProviderClient, ProviderGameRecord

from .season import resolve_season


def round_one(value: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def average_games(games: Sequence[ProviderGameRecord]) -> StatAverages:
    if not games:
        return StatAverages()
    count = len(games)
    points = sum(game.points or 0.0 for game in games)
    assists = sum(game.assists or 0.0 for game in games)
    rebounds = sum(game.tot_reb or 0.0 for game in games)
    return StatAverages(
        points=round_one(points / count),
        assists=round_one(assists / count),
        rebounds=round_one(rebounds / count),
    )


def team_of(games: Sequence[ProviderGameRecord]) -> str:
    if not games:
        return NOT_AVAILABLE
    team = games[0].team
    return team.name if team and team.name else NOT_AVAILABLE


async def player_stats(
    provider: ProviderClient,
    player_id: str,
    season: int | str | None = None,
    *,
    today: date | None = None,
) -> PlayerStats:
    season_used = resolve_season(season, today=today)
    envelope = await provider.player_statistics(player_id, season_used)

    if envelope.has_errors:
        return PlayerStats(
            player_id=player_id,
            season_used=season_used,
            team=NOT_AVAILABLE,
            average=StatAverages(),
            errors=envelope.errors,
        )

    games = envelope.games()
    return PlayerStats(
        player_id=player_id,
        season_used=season_used,
        team=team_of(games),
        average=average_games(games),
    )
