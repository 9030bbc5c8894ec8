"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Tuple

DEFAULT_ORIGIN = "https://azscore.ng"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/96.0.4664.110 Safari/537.36"
)
DEFAULT_HEADERS: Dict[str, str] = {
    "Accept-Language": "en-US,en;q=0.9",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,image/apng,*/*;q=0.8",
}
BLOCKED_RESOURCE_TYPES: Tuple[str, ...] = ("image", "font", "media")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    try:
        return int(raw) if raw not in (None, "") else default
    except Exception:
        return default


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in ("1", "true", "yes")


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


@dataclass(frozen=True)
class Settings:
    origin: str = DEFAULT_ORIGIN
    list_path: str = "/live"
    game_link_marker: str = "/football/game/"
    cache_ttl_ms: int = 6_000
    nav_timeout_ms: int = 30_000
    settle_delay_ms: int = 3_000
    headless: bool = True
    coalesce: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    user_agent: str = DEFAULT_USER_AGENT
    headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    @property
    def list_url(self) -> str:
        return f"{self.origin}{self.list_path}"

    @property
    def list_source(self) -> str:
        # "https://azscore.ng/live" -> "azscore.ng/live"
        return self.list_url.split("://", 1)[-1]


def get_settings() -> Settings:
    origin = _env_str("MATCHFEED_ORIGIN", DEFAULT_ORIGIN).rstrip("/")
    list_path = _env_str("MATCHFEED_LIST_PATH", "/live")
    if not list_path.startswith("/"):
        list_path = "/" + list_path
    return Settings(
        origin=origin,
        list_path=list_path,
        game_link_marker=_env_str("MATCHFEED_GAME_LINK_MARKER", "/football/game/"),
        cache_ttl_ms=max(0, _env_int("MATCHFEED_CACHE_TTL_MS", 6_000)),
        nav_timeout_ms=max(1, _env_int("MATCHFEED_NAV_TIMEOUT_MS", 30_000)),
        settle_delay_ms=max(0, _env_int("MATCHFEED_SETTLE_MS", 3_000)),
        headless=not _env_flag("MATCHFEED_HEADED"),
        coalesce=_env_flag("MATCHFEED_COALESCE"),
        host=_env_str("MATCHFEED_HOST", "0.0.0.0"),
        port=_env_int("PORT", 3000),
    )
