"""
Two-tier in-memory cache: one match-list snapshot plus per-id detail records.

Detail lookups resolve through an ordered fallback chain:
  1) fresh detail entry
  2) link from the current list snapshot (fresh or stale)
  3) link from a forced list refresh
  4) NotFound

The detail store has no eviction; it grows with the number of distinct ids
requested during the process lifetime.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Awaitable, Callable, Dict, Generic, Optional, TypeVar

from matchfeed.browser import Renderer
from matchfeed.config import Settings
from matchfeed.detail_extractor import extract_match_detail
from matchfeed.errors import NotFound, ScrapeFailure
from matchfeed.list_extractor import extract_match_list
from matchfeed.logging_utils import _log_step
from matchfeed.models import DetailPayload, MatchListSnapshot

T = TypeVar("T")

Clock = Callable[[], int]


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


def iso_timestamp(epoch_ms: int) -> str:
    # Same shape as JavaScript's Date.toISOString(): 2024-05-01T12:00:00.000Z
    dt = datetime.fromtimestamp(epoch_ms / 1000.0, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{int(epoch_ms) % 1000:03d}Z"


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    value: T
    fetched_at_ms: int

    def is_fresh(self, now_ms: int, ttl_ms: int) -> bool:
        return (now_ms - self.fetched_at_ms) < ttl_ms


class MatchCache:
    """
    Owns the list snapshot and the detail store.

    ``coalesce=True`` turns on single-flight: concurrent callers asking for
    the same scrape (the list, or one match id) await one pending render
    instead of each starting their own. Off by default, overlapping requests
    for a stale key each trigger an independent render.
    """

    def __init__(
        self,
        renderer: Renderer,
        settings: Optional[Settings] = None,
        *,
        clock: Clock = wall_clock_ms,
        coalesce: Optional[bool] = None,
    ):
        self.renderer = renderer
        self.settings = settings or Settings()
        self.clock = clock
        self.coalesce = self.settings.coalesce if coalesce is None else bool(coalesce)
        self._list: Optional[CacheEntry[MatchListSnapshot]] = None
        self._details: Dict[str, CacheEntry[DetailPayload]] = {}
        self._inflight: Dict[str, "asyncio.Future"] = {}

    @property
    def ttl_ms(self) -> int:
        return self.settings.cache_ttl_ms

    @property
    def list_entry(self) -> Optional[CacheEntry[MatchListSnapshot]]:
        return self._list

    def detail_entry(self, match_id: str) -> Optional[CacheEntry[DetailPayload]]:
        return self._details.get(match_id)

    @property
    def detail_count(self) -> int:
        return len(self._details)

    async def _single_flight(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        if not self.coalesce:
            return await factory()
        pending = self._inflight.get(key)
        if pending is None:
            pending = asyncio.ensure_future(factory())
            self._inflight[key] = pending
            pending.add_done_callback(lambda _f, k=key: self._inflight.pop(k, None))
        else:
            _log_step(f"joining in-flight scrape key={key}")
        # A cancelled caller must not cancel the scrape other callers share.
        return await asyncio.shield(pending)

    # --- list -----------------------------------------------------------

    async def _scrape_list(self) -> MatchListSnapshot:
        url = self.settings.list_url
        _log_step(f"fetching match list {url}")
        try:
            document = await self.renderer.render(url)
            matches = extract_match_list(
                document,
                origin=self.settings.origin,
                game_link_marker=self.settings.game_link_marker,
            )
        except ScrapeFailure:
            raise
        except Exception as e:
            raise ScrapeFailure(f"match list scrape failed: {e}") from e
        now = self.clock()
        snapshot = MatchListSnapshot(timestamp=iso_timestamp(now), source=self.settings.list_source, matches=matches)
        self._list = CacheEntry(value=snapshot, fetched_at_ms=now)
        _log_step(f"match list cached: {len(matches)} matches")
        return snapshot

    async def get_matches(self, force_refresh: bool = False) -> MatchListSnapshot:
        entry = self._list
        if not force_refresh and entry is not None and entry.is_fresh(self.clock(), self.ttl_ms):
            _log_step("match list cache hit")
            return entry.value
        return await self._single_flight("list", self._scrape_list)

    # --- details --------------------------------------------------------

    def _link_from_list(self, match_id: str) -> str:
        entry = self._list
        if entry is None:
            return ""
        summary = entry.value.find(match_id)
        return summary.link if summary is not None else ""

    async def _scrape_details(self, match_id: str, link: str) -> DetailPayload:
        _log_step(f"scraping details for match {match_id} from {link}")
        try:
            document = await self.renderer.render(link)
        except Exception as e:
            raise ScrapeFailure(f"match details scrape failed: {e}") from e
        details = extract_match_detail(document)
        now = self.clock()
        payload = DetailPayload(timestamp=iso_timestamp(now), source=link, details=details)
        if payload.ok:
            self._details[match_id] = CacheEntry(value=payload, fetched_at_ms=now)
        else:
            _log_step(f"details for match {match_id} not cached: extraction failed")
        return payload

    async def _resolve_details(self, match_id: str) -> DetailPayload:
        link = self._link_from_list(match_id)
        if not link:
            _log_step(f"match {match_id} not in list cache, refreshing list")
            snapshot = await self.get_matches(force_refresh=True)
            summary = snapshot.find(match_id)
            link = summary.link if summary is not None else ""
            if not link:
                raise NotFound(match_id)
        return await self._scrape_details(match_id, link)

    async def get_details(self, match_id: str) -> DetailPayload:
        if not (match_id or "").strip():
            raise NotFound(match_id)
        entry = self._details.get(match_id)
        if entry is not None and entry.is_fresh(self.clock(), self.ttl_ms):
            _log_step(f"details cache hit for match {match_id}")
            return entry.value
        return await self._single_flight(f"detail:{match_id}", lambda: self._resolve_details(match_id))
