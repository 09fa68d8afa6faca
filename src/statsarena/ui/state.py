"""Search view state machine.

Transitions are pure functions from a ``SearchState`` (plus an event) to a
new ``SearchState`` and, where the view has to go back to the gateway, a
request token. Every request token carries the sequence number it was issued
under; a response is applied only while that number is still current, so a
late answer for an older search or an earlier selection is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from statsarena.models import (
    NOT_AVAILABLE,
    EmptyWithHint,
    PlayerStats,
    PlayerSummary,
    SearchOutcome,
    StatAverages,
)


NO_PLAYER_FOUND = "No player found"


class SearchPhase(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    EMPTY = "empty"
    SINGLE = "single"
    MULTI = "multi"
    ERROR = "error"


@dataclass(frozen=True)
class SearchRequest:
    seq: int
    query: str


@dataclass(frozen=True)
class StatsRequest:
    seq: int
    player_id: str


@dataclass(frozen=True)
class SelectedPlayer:
    """Selected candidate plus whatever stats have been merged into it."""

    player: PlayerSummary
    team: str
    average: StatAverages | None = None
    stats_error: str | None = None

    @classmethod
    def from_summary(cls, player: PlayerSummary) -> "SelectedPlayer":
        return cls(player=player, team=player.team)

    @property
    def id(self) -> str:
        return self.player.id


@dataclass(frozen=True)
class SearchState:
    phase: SearchPhase = SearchPhase.IDLE
    query: str = ""
    results: tuple[PlayerSummary, ...] = ()
    hint: str = ""
    error: str = ""
    selected: SelectedPlayer | None = None
    list_visible: bool = True
    search_seq: int = 0
    stats_seq: int = 0

    @property
    def has_searched(self) -> bool:
        return self.phase is not SearchPhase.IDLE

    @property
    def is_searching(self) -> bool:
        return self.phase is SearchPhase.SEARCHING

    @property
    def list_shown(self) -> bool:
        return (
            self.list_visible
            and len(self.results) > 1
            and not self.is_searching
            and self.selected is not None
        )

    @property
    def can_change_player(self) -> bool:
        return self.selected is not None and len(self.results) > 1 and not self.list_shown

    @property
    def message(self) -> str | None:
        """Status line shown under the search box, if any."""
        if self.phase is SearchPhase.ERROR:
            return self.error
        if self.phase is SearchPhase.EMPTY:
            return self.hint or NO_PLAYER_FOUND
        return None


def _change_selection(state: SearchState, player: PlayerSummary | None) -> tuple[SearchState, StatsRequest | None]:
    seq = state.stats_seq + 1
    if player is None:
        return replace(state, selected=None, stats_seq=seq), None
    selected = SelectedPlayer.from_summary(player)
    return replace(state, selected=selected, stats_seq=seq), StatsRequest(seq=seq, player_id=player.id)


def submit(state: SearchState, query: str) -> tuple[SearchState, SearchRequest | None]:
    trimmed = query.strip()
    seq = state.search_seq + 1
    if not trimmed:
        cleared = replace(
            state,
            phase=SearchPhase.EMPTY,
            query="",
            results=(),
            hint="",
            error="",
            list_visible=True,
            search_seq=seq,
        )
        cleared, _ = _change_selection(cleared, None)
        return cleared, None
    searching = replace(state, phase=SearchPhase.SEARCHING, query=trimmed, hint="", error="", search_seq=seq)
    return searching, SearchRequest(seq=seq, query=trimmed)


def _is_current_search(state: SearchState, request: SearchRequest) -> bool:
    return state.is_searching and request.seq == state.search_seq


def search_succeeded(
    state: SearchState,
    request: SearchRequest,
    outcome: SearchOutcome,
) -> tuple[SearchState, StatsRequest | None]:
    if not _is_current_search(state, request):
        return state, None

    players = tuple(outcome.players)
    hint = outcome.hint if isinstance(outcome, EmptyWithHint) else ""

    if not players:
        empty = replace(state, phase=SearchPhase.EMPTY, results=(), hint=hint, list_visible=True)
        empty, _ = _change_selection(empty, None)
        return empty, None

    if len(players) == 1:
        single = replace(state, phase=SearchPhase.SINGLE, results=players, list_visible=False)
        return _change_selection(single, players[0])

    multi = replace(state, phase=SearchPhase.MULTI, results=players, list_visible=True)
    return _change_selection(multi, players[0])


def search_failed(state: SearchState, request: SearchRequest, message: str) -> SearchState:
    if not _is_current_search(state, request):
        return state
    failed = replace(state, phase=SearchPhase.ERROR, results=(), hint="", error=message, list_visible=True)
    failed, _ = _change_selection(failed, None)
    return failed


def select(state: SearchState, player: PlayerSummary) -> tuple[SearchState, StatsRequest | None]:
    """Pick ``player`` from the candidate list and hide the list."""
    hidden = replace(state, list_visible=False)
    if hidden.selected is not None and hidden.selected.id == player.id:
        return hidden, None
    return _change_selection(hidden, player)


def show_list(state: SearchState) -> SearchState:
    if len(state.results) <= 1:
        return state
    return replace(state, list_visible=True)


def _is_current_stats(state: SearchState, request: StatsRequest) -> bool:
    return (
        request.seq == state.stats_seq
        and state.selected is not None
        and state.selected.id == request.player_id
    )


def stats_loaded(state: SearchState, request: StatsRequest, stats: PlayerStats) -> SearchState:
    if not _is_current_stats(state, request):
        return state
    selected = state.selected
    merged = replace(
        selected,
        team=stats.team or selected.team,
        average=stats.average,
        stats_error=None,
    )
    return replace(state, selected=merged)


def stats_failed(state: SearchState, request: StatsRequest, message: str) -> SearchState:
    if not _is_current_stats(state, request):
        return state
    return replace(state, selected=replace(state.selected, stats_error=message))


def team_label(selected: SelectedPlayer) -> str:
    return selected.team if selected.team and selected.team != NOT_AVAILABLE else "Team loading…"
