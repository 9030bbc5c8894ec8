import unittest
from unittest.mock import patch

from matchfeed.browser import RenderOptions
from matchfeed.config import BLOCKED_RESOURCE_TYPES, get_settings


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            s = get_settings()
        self.assertEqual(s.list_url, "https://azscore.ng/live")
        self.assertEqual(s.list_source, "azscore.ng/live")
        self.assertEqual(s.cache_ttl_ms, 6000)
        self.assertEqual(s.nav_timeout_ms, 30000)
        self.assertEqual(s.settle_delay_ms, 3000)
        self.assertTrue(s.headless)
        self.assertFalse(s.coalesce)
        self.assertEqual(s.port, 3000)

    def test_env_override(self) -> None:
        with patch.dict(
            "os.environ",
            {
                "MATCHFEED_ORIGIN": "https://example.test/",
                "MATCHFEED_LIST_PATH": "today",
                "MATCHFEED_CACHE_TTL_MS": "1500",
                "MATCHFEED_HEADED": "1",
                "MATCHFEED_COALESCE": "yes",
                "PORT": "8080",
            },
            clear=True,
        ):
            s = get_settings()
        self.assertEqual(s.list_url, "https://example.test/today")
        self.assertEqual(s.cache_ttl_ms, 1500)
        self.assertFalse(s.headless)
        self.assertTrue(s.coalesce)
        self.assertEqual(s.port, 8080)

    def test_bad_numbers_fall_back(self) -> None:
        with patch.dict("os.environ", {"MATCHFEED_CACHE_TTL_MS": "soon", "PORT": ""}, clear=True):
            s = get_settings()
        self.assertEqual(s.cache_ttl_ms, 6000)
        self.assertEqual(s.port, 3000)

    def test_render_options_from_settings(self) -> None:
        with patch.dict("os.environ", {"MATCHFEED_NAV_TIMEOUT_MS": "1000", "MATCHFEED_SETTLE_MS": "0"}, clear=True):
            opts = RenderOptions.from_settings(get_settings())
        self.assertEqual(opts.timeout_ms, 1000)
        self.assertEqual(opts.settle_delay_ms, 0)
        self.assertEqual(opts.blocked_resource_types, BLOCKED_RESOURCE_TYPES)
        self.assertIn("Accept-Language", opts.headers)


if __name__ == "__main__":
    unittest.main()
