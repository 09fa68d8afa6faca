"""Interactive terminal player finder backed by the stats arena REST API."""

from __future__ import annotations

import argparse
import asyncio
import os

from statsarena.ui import GatewayClient, SearchController, render_state
from statsarena.ui.client import DEFAULT_API_BASE_URL


HELP_TEXT = "Enter a name to search, a number to pick a player, 'c' to change player, 'q' to quit."


async def _interactive(controller: SearchController) -> None:
    print(HELP_TEXT)
    while True:
        try:
            line = input("search> ").strip()
        except EOFError:
            return
        if line.lower() == "q":
            return
        if line.lower() == "c":
            print(render_state(controller.change_player()))
            continue
        if line.isdigit() and controller.state.list_shown:
            index = int(line) - 1
            results = controller.state.results
            if 0 <= index < len(results):
                print(render_state(await controller.pick(results[index])))
            else:
                print(f"Pick a number between 1 and {len(results)}")
            continue
        print(render_state(await controller.submit(line)))


async def _run(args: argparse.Namespace) -> None:
    async with GatewayClient(args.base_url, timeout=args.timeout) as client:
        controller = SearchController(client, season=args.season)
        if args.query is not None:
            print(render_state(await controller.submit(args.query)))
            return
        await _interactive(controller)


def main() -> None:
    parser = argparse.ArgumentParser(description="Search NBA player stats via the stats arena API")
    parser.add_argument(
        "base_url",
        nargs="?",
        default=os.getenv("STATS_ARENA_API_BASE_URL") or DEFAULT_API_BASE_URL,
        help="Base URL of the API, e.g. http://localhost:5000",
    )
    parser.add_argument("--query", default=None, help="Run a single search and exit")
    parser.add_argument("--season", type=int, default=None, help="Season start year for stats")
    parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout in seconds")
    args = parser.parse_args()
    asyncio.run(_run(args))


if __name__ == "__main__":
    main()
