"""Request handling logic behind the gateway routes."""

from .search import SINGLE_TOKEN_HINT, format_player, format_players, matches_all_tokens, search_players
from .season import current_season, resolve_season
from .stats import average_games, player_stats, round_one, team_of

__all__ = [
    "SINGLE_TOKEN_HINT",
    "average_games",
    "current_season",
    "format_player",
    "format_players",
    "matches_all_tokens",
    "player_stats",
    "resolve_season",
    "round_one",
    "search_players",
    "team_of",
]
