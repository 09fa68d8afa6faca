"""Plain-text rendering of the search view for terminals."""

from __future__ import annotations

from statsarena.models import NOT_AVAILABLE

from .state import SearchState, SelectedPlayer, team_label


PLACEHOLDER = "—"


def format_stat(value: float | None) -> str:
    return PLACEHOLDER if value is None else f"{value:.1f}"


def render_card(selected: SelectedPlayer) -> list[str]:
    player = selected.player
    position = player.position if player.position and player.position != NOT_AVAILABLE else "Unknown Position"
    avg = selected.average
    lines = [
        player.full_name,
        team_label(selected).upper(),
        position.upper(),
        "  PTS {}   AST {}   REB {}".format(
            format_stat(avg.points if avg else None),
            format_stat(avg.assists if avg else None),
            format_stat(avg.rebounds if avg else None),
        ),
    ]
    if selected.stats_error:
        lines.append(f"  (stats unavailable: {selected.stats_error})")
    return lines


def render_state(state: SearchState) -> str:
    lines: list[str] = []
    if state.is_searching:
        lines.append("Searching…")
    elif state.has_searched and state.message:
        lines.append(state.message)

    if state.list_shown:
        for index, player in enumerate(state.results, start=1):
            marker = "*" if state.selected and state.selected.id == player.id else " "
            lines.append(f"{marker}{index:>2}. {player.full_name} ({player.position or NOT_AVAILABLE})")
    elif state.can_change_player:
        lines.append("[c] Change player")

    if state.selected is not None:
        if lines:
            lines.append("")
        lines.extend(render_card(state.selected))
    return "\n".join(lines)
