import unittest
from pathlib import Path

from static_assets.content_types import DEFAULT_CONTENT_TYPE, content_type_for


class ContentTypeTests(unittest.TestCase):
    def test_known_extensions_map_to_fixed_types(self) -> None:
        self.assertEqual("image/svg+xml", content_type_for("logo.svg"))
        self.assertEqual("text/css", content_type_for(Path("css/site.css")))
        self.assertEqual("application/javascript", content_type_for("app.js"))
        self.assertEqual("image/jpeg", content_type_for("a.jpg"))
        self.assertEqual("image/jpeg", content_type_for("a.jpeg"))
        self.assertEqual("font/woff2", content_type_for("font.woff2"))
        self.assertEqual("application/vnd.ms-fontobject", content_type_for("font.eot"))
        self.assertEqual("text/html", content_type_for("index.htm"))

    def test_lookup_is_case_insensitive(self) -> None:
        self.assertEqual("image/png", content_type_for("PHOTO.PNG"))
        self.assertEqual("application/json", content_type_for("Data.Json"))

    def test_unknown_or_missing_extension_falls_back_to_octet_stream(self) -> None:
        self.assertEqual("application/octet-stream", DEFAULT_CONTENT_TYPE)
        self.assertEqual(DEFAULT_CONTENT_TYPE, content_type_for("blob.xyz"))
        self.assertEqual(DEFAULT_CONTENT_TYPE, content_type_for("Makefile"))
        self.assertEqual(DEFAULT_CONTENT_TYPE, content_type_for("archive.tar.gz"))


if __name__ == "__main__":
    unittest.main()
