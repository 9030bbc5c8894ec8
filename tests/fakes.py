"""Test doubles for the renderer and the clock."""

import asyncio

from matchfeed.document import parse_document
from matchfeed.errors import RenderFailure


class FakeClock:
    def __init__(self, now_ms: int = 1_714_564_800_000):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


class FakeRenderer:
    """Serves canned HTML per URL and records every render call."""

    def __init__(self, pages: dict):
        self.pages = dict(pages)
        self.calls = []
        # Set to an asyncio.Event to hold every render until it is set.
        self.gate = None

    async def render(self, url: str):
        self.calls.append(url)
        # Yield like a real navigation would.
        await asyncio.sleep(0)
        if self.gate is not None:
            await self.gate.wait()
        page = self.pages.get(url)
        if isinstance(page, Exception):
            raise page
        if page is None:
            raise RenderFailure(f"no page for {url}")
        return parse_document(page, url=url)
