"""Async driver that feeds gateway responses into the search state machine."""

from __future__ import annotations

import logging

from statsarena.models import PlayerSummary

from . import state as machine
from .client import GatewayClient, GatewayError
from .state import SearchState, StatsRequest


logger = logging.getLogger(__name__)


class SearchController:
    """Owns the current ``SearchState`` and performs the gateway calls it asks for.

    Methods may be awaited concurrently; ordering is resolved by the sequence
    numbers inside the state, not by call order.
    """

    def __init__(self, client: GatewayClient, *, season: int | None = None):
        self.client = client
        self.season = season
        self.state = SearchState()

    async def submit(self, query: str) -> SearchState:
        self.state, request = machine.submit(self.state, query)
        if request is None:
            return self.state
        try:
            outcome = await self.client.search(request.query)
        except GatewayError as exc:
            logger.warning("Search for %r failed: %s", request.query, exc.message)
            self.state = machine.search_failed(self.state, request, exc.message)
            return self.state
        self.state, stats_request = machine.search_succeeded(self.state, request, outcome)
        if stats_request is not None:
            await self._load_stats(stats_request)
        return self.state

    async def pick(self, player: PlayerSummary) -> SearchState:
        self.state, stats_request = machine.select(self.state, player)
        if stats_request is not None:
            await self._load_stats(stats_request)
        return self.state

    def change_player(self) -> SearchState:
        self.state = machine.show_list(self.state)
        return self.state

    async def _load_stats(self, request: StatsRequest) -> None:
        try:
            stats = await self.client.player_stats(request.player_id, self.season)
        except GatewayError as exc:
            logger.warning("Stats for player %s failed: %s", request.player_id, exc.message)
            self.state = machine.stats_failed(self.state, request, exc.message)
            return
        if stats.errors:
            logger.info("Provider reported errors for player %s: %s", request.player_id, stats.errors)
        self.state = machine.stats_loaded(self.state, request, stats)
