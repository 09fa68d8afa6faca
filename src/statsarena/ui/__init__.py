"""Client-side search view: gateway client, state machine, controller and renderer."""

from .client import GatewayClient, GatewayError
from .controller import SearchController
from .render import PLACEHOLDER, render_state
from .state import SearchPhase, SearchRequest, SearchState, SelectedPlayer, StatsRequest

__all__ = [
    "GatewayClient",
    "GatewayError",
    "PLACEHOLDER",
    "SearchController",
    "SearchPhase",
    "SearchRequest",
    "SearchState",
    "SelectedPlayer",
    "StatsRequest",
    "render_state",
]
