# Playwright renderer: one short-lived Chromium per page, heavy resources
# blocked, fixed settle delay before the DOM snapshot is taken.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Route
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from matchfeed.config import BLOCKED_RESOURCE_TYPES, DEFAULT_HEADERS, DEFAULT_USER_AGENT, Settings
from matchfeed.document import Document, parse_document
from matchfeed.errors import RenderFailure
from matchfeed.logging_utils import _dbg, _log_step


class Renderer(Protocol):
    async def render(self, url: str) -> Document:
        ...


@dataclass(frozen=True)
class RenderOptions:
    blocked_resource_types: Tuple[str, ...] = BLOCKED_RESOURCE_TYPES
    user_agent: str = DEFAULT_USER_AGENT
    headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    timeout_ms: int = 30_000
    settle_delay_ms: int = 3_000
    headless: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "RenderOptions":
        return cls(
            user_agent=settings.user_agent,
            headers=dict(settings.headers),
            timeout_ms=settings.nav_timeout_ms,
            settle_delay_ms=settings.settle_delay_ms,
            headless=settings.headless,
        )


_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--disable-gpu",
    "--window-size=1920,1080",
]


class PlaywrightRenderer:
    def __init__(self, options: Optional[RenderOptions] = None):
        self.options = options or RenderOptions()

    async def _route(self, route: Route) -> None:
        if route.request.resource_type in self.options.blocked_resource_types:
            await route.abort()
        else:
            await route.continue_()

    async def render(self, url: str) -> Document:
        opts = self.options
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=opts.headless, args=_LAUNCH_ARGS)
                try:
                    context = await browser.new_context(
                        user_agent=opts.user_agent,
                        extra_http_headers=opts.headers,
                        viewport={"width": 1920, "height": 1080},
                        java_script_enabled=True,
                    )
                    page = await context.new_page()
                    await page.route("**/*", self._route)
                    _dbg(f"goto {url}")
                    await page.goto(url, wait_until="domcontentloaded", timeout=opts.timeout_ms)
                    if opts.settle_delay_ms > 0:
                        await page.wait_for_timeout(opts.settle_delay_ms)
                    html = await page.content()
                finally:
                    await browser.close()
                    _log_step("browser closed")
        except PlaywrightTimeoutError as e:
            raise RenderFailure(f"navigation timeout after {opts.timeout_ms} ms: {url}") from e
        except PlaywrightError as e:
            raise RenderFailure(f"render failed for {url}: {e}") from e
        return parse_document(html, url=url)
