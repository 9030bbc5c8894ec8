#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from matchfeed.browser import PlaywrightRenderer, RenderOptions
from matchfeed.config import get_settings
from matchfeed.detail_extractor import extract_match_detail
from matchfeed.errors import RenderFailure
from matchfeed.list_extractor import extract_match_list


async def _dump(url: str, out: Path, *, headed: bool) -> int:
    settings = get_settings()
    if headed:
        settings = replace(settings, headless=False)
    renderer = PlaywrightRenderer(RenderOptions.from_settings(settings))
    try:
        document = await renderer.render(url)
    except RenderFailure as e:
        print(f"render failed: {e}", file=sys.stderr)
        return 1
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(str(document.root), encoding="utf-8")
    matches = extract_match_list(document, origin=settings.origin, game_link_marker=settings.game_link_marker)
    detail = extract_match_detail(document)
    print(f"saved {out} ({out.stat().st_size} bytes)")
    print(f"  list containers parsed: {len(matches)}")
    print(f"  detail: {type(detail).__name__}")
    return 0


def main() -> int:
    ap = argparse.ArgumentParser(description="Render a page and save its HTML as an extractor fixture")
    ap.add_argument("url")
    ap.add_argument("--out", type=Path, default=Path("fixtures/page.html"))
    ap.add_argument("--headed", action="store_true")
    args = ap.parse_args()
    return asyncio.run(_dump(args.url, args.out, headed=args.headed))


if __name__ == "__main__":
    raise SystemExit(main())
