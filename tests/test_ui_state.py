from statsarena.models import EmptyWithHint, PlayerStats, PlayerSummary, StatAverages, results
from statsarena.ui import state as machine
from statsarena.ui.state import NO_PLAYER_FOUND, SearchPhase, SearchState


def _player(player_id: str, name: str) -> PlayerSummary:
    first, last = name.split(" ", 1)
    return PlayerSummary(id=player_id, full_name=name, first_name=first, last_name=last)


LEBRON = _player("265", "LeBron James")
BRONNY = _player("266", "Bronny James")


def _stats(player_id: str, points: float, team: str = "Los Angeles Lakers") -> PlayerStats:
    return PlayerStats(
        player_id=player_id,
        season_used=2024,
        team=team,
        average=StatAverages(points=points, assists=5.0, rebounds=7.0),
    )


def _searched(*players: PlayerSummary):
    state, request = machine.submit(SearchState(), "james")
    return machine.search_succeeded(state, request, results(players))


def test_initial_state_is_idle():
    state = SearchState()
    assert state.phase is SearchPhase.IDLE
    assert not state.has_searched
    assert state.message is None


def test_blank_submit_clears_without_request():
    state, _ = _searched(LEBRON, BRONNY)
    state, request = machine.submit(state, "   ")
    assert request is None
    assert state.phase is SearchPhase.EMPTY
    assert state.results == ()
    assert state.selected is None
    assert state.list_visible


def test_submit_moves_to_searching():
    state, request = machine.submit(SearchState(), "  lebron james ")
    assert state.phase is SearchPhase.SEARCHING
    assert request is not None
    assert request.query == "lebron james"
    assert request.seq == state.search_seq


def test_empty_results_show_no_player_found():
    state, stats_request = _searched()
    assert stats_request is None
    assert state.phase is SearchPhase.EMPTY
    assert state.message == NO_PLAYER_FOUND


def test_hint_replaces_no_player_found():
    state, request = machine.submit(SearchState(), "lebron")
    state, _ = machine.search_succeeded(state, request, EmptyWithHint(hint="Try a last name"))
    assert state.phase is SearchPhase.EMPTY
    assert state.results == ()
    assert state.message == "Try a last name"


def test_single_result_is_auto_selected_and_list_hidden():
    state, stats_request = _searched(LEBRON)
    assert state.phase is SearchPhase.SINGLE
    assert state.selected is not None and state.selected.id == "265"
    assert not state.list_shown
    assert not state.can_change_player
    assert stats_request is not None and stats_request.player_id == "265"


def test_multiple_results_select_first_and_show_list():
    state, stats_request = _searched(LEBRON, BRONNY)
    assert state.phase is SearchPhase.MULTI
    assert state.selected.id == "265"
    assert state.list_shown
    assert stats_request.player_id == "265"


def test_pick_hides_list_and_change_player_reveals_it():
    state, _ = _searched(LEBRON, BRONNY)
    state, stats_request = machine.select(state, BRONNY)
    assert state.selected.id == "266"
    assert not state.list_shown
    assert state.can_change_player
    assert stats_request.player_id == "266"

    state = machine.show_list(state)
    assert state.list_shown
    assert state.selected.id == "266"


def test_picking_current_player_keeps_loaded_stats():
    state, stats_request = _searched(LEBRON, BRONNY)
    state = machine.stats_loaded(state, stats_request, _stats("265", 27.1))
    state, again = machine.select(state, LEBRON)
    assert again is None
    assert state.selected.average.points == 27.1


def test_stats_merge_into_selection():
    state, stats_request = _searched(LEBRON)
    state = machine.stats_loaded(state, stats_request, _stats("265", 25.0))
    assert state.selected.team == "Los Angeles Lakers"
    assert state.selected.average.points == 25.0


def test_late_stats_for_previous_selection_are_dropped():
    state, request_a = _searched(LEBRON, BRONNY)
    state, request_b = machine.select(state, BRONNY)

    state = machine.stats_loaded(state, request_a, _stats("265", 30.0))
    assert state.selected.id == "266"
    assert state.selected.average is None

    state = machine.stats_loaded(state, request_b, _stats("266", 4.8))
    assert state.selected.average.points == 4.8


def test_stats_for_reselected_player_use_latest_request_only():
    state, first_a = _searched(LEBRON, BRONNY)
    state, _ = machine.select(state, BRONNY)
    state = machine.show_list(state)
    state, second_a = machine.select(state, LEBRON)

    state = machine.stats_loaded(state, first_a, _stats("265", 1.0))
    assert state.selected.average is None
    state = machine.stats_loaded(state, second_a, _stats("265", 25.0))
    assert state.selected.average.points == 25.0


def test_stale_search_response_is_dropped():
    state, first = machine.submit(SearchState(), "james")
    state, second = machine.submit(state, "curry")

    stale, stats_request = machine.search_succeeded(state, first, results([LEBRON, BRONNY]))
    assert stale is state
    assert stats_request is None

    state, _ = machine.search_succeeded(state, second, results([_player("124", "Stephen Curry")]))
    assert state.selected.id == "124"


def test_search_failure_is_distinct_from_no_results():
    state, request = machine.submit(SearchState(), "james")
    state = machine.search_failed(state, request, "Failed to fetch players")
    assert state.phase is SearchPhase.ERROR
    assert state.message == "Failed to fetch players"
    assert state.message != NO_PLAYER_FOUND
    assert state.selected is None


def test_stats_failure_keeps_placeholders():
    state, stats_request = _searched(LEBRON)
    state = machine.stats_failed(state, stats_request, "Failed to fetch player stats")
    assert state.selected.average is None
    assert state.selected.stats_error == "Failed to fetch player stats"


def test_new_search_discards_in_flight_stats():
    state, stats_request = _searched(LEBRON)
    state, _ = machine.submit(state, "   ")
    state = machine.stats_loaded(state, stats_request, _stats("265", 25.0))
    assert state.selected is None
