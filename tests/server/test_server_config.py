import tempfile
import unittest
from pathlib import Path

from app_config_schema import StaticServerSettings
from server.config import ServerConfigurationError, StaticServerConfig


class StaticServerConfigTests(unittest.TestCase):
    def test_from_settings_copies_values_and_normalizes_prefix(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            settings = StaticServerSettings(
                enabled=True,
                host="0.0.0.0",
                port=9000,
                root_dir=f"  {temp_dir}  ",
                url_prefix="/assets/",
                cache_max_age_seconds=600,
            )

            config = StaticServerConfig.from_settings(settings)

            self.assertEqual("0.0.0.0", config.host)
            self.assertEqual(9000, config.port)
            self.assertEqual(temp_dir, config.root_dir)
            self.assertEqual("/assets", config.url_prefix)
            self.assertEqual(600, config.cache_max_age_seconds)

    def test_from_settings_defaults_blank_prefix(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            settings = StaticServerSettings(root_dir=temp_dir, url_prefix="")
            self.assertEqual("/static", StaticServerConfig.from_settings(settings).url_prefix)

    def test_rejects_missing_or_non_directory_root(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            a_file = Path(temp_dir) / "index.html"
            a_file.write_text("<html></html>", encoding="utf-8")

            with self.assertRaises(ServerConfigurationError):
                StaticServerConfig(root_dir=str(Path(temp_dir) / "missing"))
            with self.assertRaises(ServerConfigurationError):
                StaticServerConfig(root_dir=str(a_file))
            with self.assertRaises(ServerConfigurationError):
                StaticServerConfig(root_dir="")

    def test_disabled_server_skips_root_validation(self) -> None:
        config = StaticServerConfig(enabled=False, root_dir="")
        self.assertFalse(config.enabled)

    def test_rejects_invalid_network_and_cache_values(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            for kwargs in (
                {"host": " "},
                {"port": 0},
                {"port": 70000},
                {"url_prefix": "static"},
                {"cache_max_age_seconds": -1},
            ):
                with self.subTest(**kwargs):
                    with self.assertRaises(ServerConfigurationError):
                        StaticServerConfig(root_dir=temp_dir, **kwargs)


if __name__ == "__main__":
    unittest.main()
