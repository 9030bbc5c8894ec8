from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import replace
from typing import List, Optional

import uvicorn

from matchfeed.api import create_app
from matchfeed.browser import PlaywrightRenderer, RenderOptions
from matchfeed.cache import MatchCache
from matchfeed.config import Settings, get_settings
from matchfeed.errors import MatchfeedError, NotFound


def _build_cache(settings: Settings) -> MatchCache:
    renderer = PlaywrightRenderer(RenderOptions.from_settings(settings))
    return MatchCache(renderer, settings)


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


async def cmd_matches(settings: Settings, *, refresh: bool, limit: int) -> int:
    cache = _build_cache(settings)
    try:
        snapshot = await cache.get_matches(force_refresh=refresh)
    except MatchfeedError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    payload = snapshot.to_dict()
    if limit > 0:
        payload["matches"] = payload["matches"][:limit]
    _print_json(payload)
    return 0


async def cmd_details(settings: Settings, *, match_id: str) -> int:
    cache = _build_cache(settings)
    try:
        payload = await cache.get_details(match_id)
    except NotFound:
        print(f"error: match {match_id!r} not found", file=sys.stderr)
        return 1
    except MatchfeedError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    _print_json(payload.to_dict())
    return 0 if payload.ok else 1


def cmd_serve(settings: Settings, *, host: str, port: int) -> int:
    app = create_app(_build_cache(settings))
    print(f"Server running on http://{host}:{port}", flush=True)
    uvicorn.run(app, host=host, port=port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="matchfeed")
    parser.add_argument("--headed", action="store_true", help="Run with visible browser window")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_serve = sub.add_parser("serve", help="Serve the JSON API")
    p_serve.add_argument("--host", default=settings.host)
    p_serve.add_argument("--port", type=int, default=settings.port)

    p_matches = sub.add_parser("matches", help="Scrape the live match list and print JSON")
    p_matches.add_argument("--refresh", action="store_true", help="Ignore cached data")
    p_matches.add_argument("--limit", type=int, default=0, help="Print at most N matches (0 = all)")

    p_details = sub.add_parser("details", help="Scrape one match detail page and print JSON")
    p_details.add_argument("match_id", help="Match id (data-game-id on the list page)")

    args = parser.parse_args(argv)
    if args.headed:
        settings = replace(settings, headless=False)

    if args.cmd == "serve":
        return cmd_serve(settings, host=args.host, port=args.port)
    if args.cmd == "matches":
        return asyncio.run(cmd_matches(settings, refresh=args.refresh, limit=args.limit))
    if args.cmd == "details":
        return asyncio.run(cmd_details(settings, match_id=args.match_id))
    raise SystemExit(2)


if __name__ == "__main__":
    raise SystemExit(main())
