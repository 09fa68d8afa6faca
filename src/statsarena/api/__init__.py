"""REST API for the stats gateway."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from statsarena.api.schemas import ErrorResponse, HintResponse
from statsarena.gateway import player_stats, search_players
from statsarena.models import PlayerStats, PlayerSummary, outcome_to_payload
from statsarena.provider import ProviderClient, ProviderError
from statsarena.settings import GatewaySettings


logger = logging.getLogger("uvicorn.error")

SEARCH_FAILED_MESSAGE = "Failed to fetch players"
STATS_FAILED_MESSAGE = "Failed to fetch player stats"


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


def create_app(
    settings: GatewaySettings | None = None,
    *,
    provider: ProviderClient | None = None,
) -> FastAPI:
    settings = settings or GatewaySettings()
    provider = provider or ProviderClient(settings)

    app = FastAPI(title="stats arena gateway")
    app.state.settings = settings
    app.state.provider = provider
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Server is running"

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(
        "/players",
        response_model=list[PlayerSummary] | HintResponse,
        responses={500: {"model": ErrorResponse}},
    )
    async def players(search: str = Query("")) -> Any:
        try:
            outcome = await search_players(provider, search)
        except ProviderError as exc:
            logger.error("Player search for %r failed: %s", search, exc.message)
            return _error_response(SEARCH_FAILED_MESSAGE)
        except Exception:
            logger.exception("Unexpected failure searching players for %r", search)
            return _error_response(SEARCH_FAILED_MESSAGE)
        return JSONResponse(content=outcome_to_payload(outcome))

    @app.get(
        "/player-stats/{player_id}",
        response_model=PlayerStats,
        response_model_exclude_none=True,
        responses={500: {"model": ErrorResponse}},
    )
    async def stats(player_id: str, season: str | None = Query(None)) -> Any:
        try:
            result = await player_stats(provider, player_id, season)
        except ProviderError as exc:
            logger.error("Stats lookup for player %s failed: %s", player_id, exc.message)
            return _error_response(STATS_FAILED_MESSAGE)
        except Exception:
            logger.exception("Unexpected failure fetching stats for player %s", player_id)
            return _error_response(STATS_FAILED_MESSAGE)
        return result

    return app
