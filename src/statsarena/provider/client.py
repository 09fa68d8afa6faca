"""Async HTTP access to the third-party statistics provider."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from statsarena.settings import GatewaySettings

from .schemas import ProviderEnvelope


logger = logging.getLogger("uvicorn.error")


class ProviderError(Exception):
    """The provider could not be reached or answered with something unusable."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ProviderClient:
    """Thin wrapper that issues one request per call and decodes the envelope.

    A fresh ``httpx.AsyncClient`` is opened per call so no connection state is
    shared between gateway requests. ``transport`` exists for tests.
    """

    def __init__(self, settings: GatewaySettings, *, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.provider_base_url,
            headers=self.settings.provider_headers(),
            timeout=self.settings.timeout_seconds,
            transport=self._transport,
        )

    async def _get(self, path: str, params: Mapping[str, Any]) -> ProviderEnvelope:
        try:
            async with self._client() as client:
                resp = await client.get(path, params=dict(params))
        except httpx.HTTPError as exc:
            raise ProviderError(f"provider request to {path} failed: {exc!r}") from exc

        if resp.status_code >= 400:
            raise ProviderError(
                f"provider returned HTTP {resp.status_code} for {path}",
                status_code=resp.status_code,
            )
        try:
            payload = resp.json()
        except ValueError as exc:
            raise ProviderError(f"provider returned invalid JSON for {path}") from exc
        if not isinstance(payload, dict):
            raise ProviderError(f"provider returned {type(payload).__name__} instead of an object for {path}")
        try:
            return ProviderEnvelope.model_validate(payload)
        except ValidationError as exc:
            raise ProviderError(f"provider payload for {path} failed validation: {exc}") from exc

    async def search_players(self, term: str) -> ProviderEnvelope:
        envelope = await self._get("/players", {"search": term})
        if envelope.has_errors:
            logger.warning("Provider reported errors for search %r: %s", term, envelope.errors)
        return envelope

    async def player_statistics(self, player_id: str, season: int) -> ProviderEnvelope:
        return await self._get("/players/statistics", {"id": player_id, "season": season})
