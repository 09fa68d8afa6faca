import pytest
from pydantic import ValidationError

from statsarena.models import PlayerStats, PlayerSummary, StatAverages


def test_player_summary_is_frozen():
    player = PlayerSummary(
        id="265",
        full_name="LeBron James",
        first_name="LeBron",
        last_name="James",
        position="F",
        team="Los Angeles Lakers",
        teamId="17",
    )

    assert player.team_id == "17"
    assert player.model_dump(by_alias=True)["teamId"] == "17"

    with pytest.raises((TypeError, ValidationError)):
        player.team = "Boston Celtics"  # type: ignore[misc]


def test_player_summary_defaults_to_not_available():
    player = PlayerSummary(id="1", full_name="Anon")
    assert player.position == "N/A"
    assert player.team == "N/A"
    assert player.team_id is None


def test_player_summary_requires_id():
    with pytest.raises(ValidationError):
        PlayerSummary(id="", full_name="Nobody")


def test_player_stats_serializes_camel_case():
    stats = PlayerStats(player_id="265", season_used=2024, team="Lakers", average=StatAverages(points=25.0))
    body = stats.model_dump(by_alias=True, exclude_none=True)
    assert body == {
        "playerId": "265",
        "seasonUsed": 2024,
        "team": "Lakers",
        "average": {"points": 25.0, "assists": 0.0, "rebounds": 0.0},
    }
