"""Shared fixtures: a scripted provider behind ``httpx.MockTransport``."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from statsarena.provider import ProviderClient
from statsarena.settings import GatewaySettings


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(provider_api_key="test-key", provider_base_url="https://provider.test")


def envelope(response: list[dict[str, Any]] | None = None, errors: Any = None) -> dict[str, Any]:
    items = response or []
    return {
        "get": "players",
        "parameters": {},
        "errors": [] if errors is None else errors,
        "results": len(items),
        "response": items,
    }


def provider_player(
    player_id: int,
    first: str | None,
    last: str | None,
    *,
    pos: str | None = None,
    team: Any = None,
) -> dict[str, Any]:
    standard: dict[str, Any] = {"jersey": 6, "active": True}
    if pos is not None:
        standard["pos"] = pos
    if team is not None:
        standard["team"] = team
    return {"id": player_id, "firstname": first, "lastname": last, "leagues": {"standard": standard}}


class FakeProvider:
    """Records provider requests and answers them from a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self, settings: GatewaySettings) -> ProviderClient:
        return ProviderClient(settings, transport=httpx.MockTransport(self))

    @property
    def search_terms(self) -> list[str]:
        return [req.url.params.get("search") for req in self.requests if req.url.path == "/players"]


@pytest.fixture
def fake_provider() -> Callable[..., FakeProvider]:
    def build(
        *,
        players: list[dict[str, Any]] | None = None,
        games: list[dict[str, Any]] | None = None,
        stats_errors: Any = None,
        status_code: int = 200,
    ) -> FakeProvider:
        def handler(request: httpx.Request) -> httpx.Response:
            if status_code != 200:
                return httpx.Response(status_code, json={"message": "upstream down"})
            if request.url.path == "/players/statistics":
                return httpx.Response(200, json=envelope(games, errors=stats_errors))
            if request.url.path == "/players":
                return httpx.Response(200, json=envelope(players))
            return httpx.Response(404, json={"message": "not found"})

        return FakeProvider(handler)

    return build
