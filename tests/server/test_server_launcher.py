import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from server import launcher


class LauncherTests(unittest.TestCase):
    def test_main_returns_error_code_for_invalid_config(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text(
                '[static_server]\nroot_dir = "does-not-exist"\n',
                encoding="utf-8",
            )

            self.assertEqual(1, launcher.main([str(config_path)]))

    def test_main_exits_cleanly_when_disabled(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text("[static_server]\nenabled = false\n", encoding="utf-8")

            with patch.object(launcher, "StaticAssetServer") as server_cls:
                self.assertEqual(0, launcher.main([str(config_path)]))

            server_cls.assert_not_called()


if __name__ == "__main__":
    unittest.main()
