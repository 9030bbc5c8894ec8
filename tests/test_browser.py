import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from matchfeed.browser import PlaywrightRenderer, RenderOptions
from matchfeed.errors import RenderFailure


def _fake_playwright(page):
    browser = MagicMock()
    browser.close = AsyncMock()
    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)
    browser.new_context = AsyncMock(return_value=context)
    pw = MagicMock()
    pw.chromium.launch = AsyncMock(return_value=browser)
    cm = MagicMock()
    cm.__aenter__ = AsyncMock(return_value=pw)
    cm.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=cm), browser


def _fake_page(html="<html><body><div data-game-id='1'></div></body></html>"):
    page = MagicMock()
    page.route = AsyncMock()
    page.goto = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.content = AsyncMock(return_value=html)
    return page


def _fake_route(resource_type):
    route = MagicMock()
    route.request.resource_type = resource_type
    route.abort = AsyncMock()
    route.continue_ = AsyncMock()
    return route


class RouteBlockingTests(unittest.IsolatedAsyncioTestCase):
    async def test_heavy_resources_are_aborted(self) -> None:
        renderer = PlaywrightRenderer()
        for kind in ("image", "font", "media"):
            route = _fake_route(kind)
            await renderer._route(route)
            route.abort.assert_awaited_once()
            route.continue_.assert_not_awaited()

    async def test_other_resources_continue(self) -> None:
        renderer = PlaywrightRenderer()
        for kind in ("document", "script", "xhr", "stylesheet"):
            route = _fake_route(kind)
            await renderer._route(route)
            route.continue_.assert_awaited_once()
            route.abort.assert_not_awaited()


class RenderTests(unittest.IsolatedAsyncioTestCase):
    async def test_render_returns_document_and_closes_browser(self) -> None:
        page = _fake_page()
        factory, browser = _fake_playwright(page)
        with patch("matchfeed.browser.async_playwright", factory):
            doc = await PlaywrightRenderer(RenderOptions(settle_delay_ms=3000)).render("https://azscore.ng/live")
        self.assertEqual(doc.url, "https://azscore.ng/live")
        self.assertIsNotNone(doc.root.select_one("div[data-game-id]"))
        page.goto.assert_awaited_once_with("https://azscore.ng/live", wait_until="domcontentloaded", timeout=30000)
        page.wait_for_timeout.assert_awaited_once_with(3000)
        browser.close.assert_awaited_once()

    async def test_navigation_timeout_is_render_failure(self) -> None:
        page = _fake_page()
        page.goto.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded")
        factory, browser = _fake_playwright(page)
        with patch("matchfeed.browser.async_playwright", factory):
            with self.assertRaises(RenderFailure) as ctx:
                await PlaywrightRenderer().render("https://azscore.ng/live")
        self.assertIn("timeout", str(ctx.exception))
        page.content.assert_not_awaited()
        browser.close.assert_awaited_once()

    async def test_settle_delay_can_be_disabled(self) -> None:
        page = _fake_page()
        factory, _browser = _fake_playwright(page)
        with patch("matchfeed.browser.async_playwright", factory):
            await PlaywrightRenderer(RenderOptions(settle_delay_ms=0)).render("https://x.test/")
        page.wait_for_timeout.assert_not_awaited()


if __name__ == "__main__":
    unittest.main()
