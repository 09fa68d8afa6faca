"""Async REST client for the gateway, used by the search UI."""

from __future__ import annotations

import os
import urllib.parse
from typing import Any

import httpx
from pydantic import ValidationError

from statsarena.models import PlayerStats, SearchOutcome, outcome_from_payload


DEFAULT_API_BASE_URL = "http://localhost:5000"


class GatewayError(Exception):
    """The gateway failed or could not be reached."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_text(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return f"HTTP {resp.status_code}"
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"HTTP {resp.status_code}"


class GatewayClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "GatewayClient":
        base_url = os.getenv("STATS_ARENA_API_BASE_URL") or DEFAULT_API_BASE_URL
        return cls(base_url, **kwargs)

    async def __aenter__(self) -> "GatewayClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            resp = await self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            raise GatewayError(f"Could not reach the stats service: {exc!r}") from exc
        if resp.status_code >= 400:
            raise GatewayError(_error_text(resp), status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise GatewayError("Stats service returned invalid JSON") from exc

    async def search(self, query: str) -> SearchOutcome:
        payload = await self._get_json("/players", {"search": query})
        try:
            return outcome_from_payload(payload)
        except (ValueError, ValidationError) as exc:
            raise GatewayError(f"Unexpected search response: {exc}") from exc

    async def player_stats(self, player_id: str, season: int | None = None) -> PlayerStats:
        params = {"season": season} if season is not None else None
        payload = await self._get_json(f"/player-stats/{urllib.parse.quote(player_id, safe='')}", params)
        try:
            return PlayerStats.model_validate(payload)
        except ValidationError as exc:
            raise GatewayError(f"Unexpected stats response: {exc}") from exc
