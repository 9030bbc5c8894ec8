"""Logging helpers for scraper internals."""

from __future__ import annotations

import os
import sys


def _enabled(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in ("1", "true", "yes")


def _dbg(msg: str) -> None:
    if _enabled("MATCHFEED_DEBUG"):
        print(f"[debug] {msg}", flush=True)


def _log_step(msg: str) -> None:
    """
    Progress logging for scrapes and cache decisions.
    Enabled when MATCHFEED_PROGRESS is set.
    """
    if _enabled("MATCHFEED_PROGRESS"):
        print(f"[progress] {msg}", flush=True)


def _warn(msg: str) -> None:
    print(f"[warn] {msg}", file=sys.stderr, flush=True)
