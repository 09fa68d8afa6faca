"""Player search: provider lookup, normalization and local name filtering."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from statsarena.models import (
    NOT_AVAILABLE,
    EmptyWithHint,
    PlayerSummary,
    SearchOutcome,
    results,
)
from statsarena.provider import ProviderClient, ProviderPlayer


logger = logging.getLogger("uvicorn.error")

SINGLE_TOKEN_HINT = (
    "No player matched that single name. Try searching by last name "
    "(e.g. \"James\") or by full name (e.g. \"LeBron James\")."
)


def tokenize(query: str) -> list[str]:
    return query.split()


def format_player(record: ProviderPlayer) -> PlayerSummary | None:
    """Map a decoded provider record onto ``PlayerSummary``.

    Returns ``None`` for records without an identifier.
    """
    if not record.id:
        return None
    first = (record.firstname or "").strip()
    last = (record.lastname or "").strip()
    standard = record.standard
    team = standard.team if standard else None
    team_id = None
    if standard is not None:
        team_id = standard.team_id or (team.id if team else None)
    return PlayerSummary(
        id=record.id,
        full_name=f"{first} {last}".strip(),
        first_name=first,
        last_name=last,
        position=(standard.pos if standard and standard.pos else NOT_AVAILABLE),
        team=(team.name if team and team.name else NOT_AVAILABLE),
        team_id=team_id,
    )


def format_players(records: Iterable[ProviderPlayer]) -> list[PlayerSummary]:
    players: list[PlayerSummary] = []
    for record in records:
        player = format_player(record)
        if player is None:
            logger.debug("Skipping provider player without id: %r", record)
            continue
        players.append(player)
    return players


def matches_all_tokens(player: PlayerSummary, tokens: Sequence[str]) -> bool:
    name = player.full_name.lower()
    return all(token.lower() in name for token in tokens)


async def search_players(provider: ProviderClient, query: str | None) -> SearchOutcome:
    """Run the search rules against ``provider``.

    Multi-word queries hit the provider with the last word only, then keep the
    candidates whose full name contains every word. A single word that finds
    nothing yields a hint rather than a bare empty list.
    """
    tokens = tokenize(query or "")
    if not tokens:
        return results([])

    if len(tokens) > 1:
        envelope = await provider.search_players(tokens[-1])
        candidates = format_players(envelope.players())
        if not candidates:
            return results([])
        return results([player for player in candidates if matches_all_tokens(player, tokens)])

    envelope = await provider.search_players(tokens[0])
    candidates = format_players(envelope.players())
    if not candidates:
        return EmptyWithHint(hint=SINGLE_TOKEN_HINT)
    return results(candidates)
