from __future__ import annotations

import contextlib
import io
import logging
import os
import unittest
from unittest.mock import patch

from mimematch.cli import EXIT_CONFIG, EXIT_MISS, EXIT_OK, MimeMatchCli, main
from mimematch.config import Settings
from mimematch.logging.helpers import is_trace_enabled


def _run(*argv: str, registry: str = "none"):
    return MimeMatchCli(Settings(registry=registry)).run(list(argv))


class CliCommandTests(unittest.TestCase):
    def test_resolve(self) -> None:
        self.assertEqual(_run("resolve", "html"), (EXIT_OK, "text/html"))
        self.assertEqual(_run("resolve", "exe"), (EXIT_OK, "application/octet-stream"))
        self.assertEqual(_run("resolve", "qqq"), (EXIT_MISS, ""))

    def test_resolve_well_known_skips_registry_setup(self) -> None:
        self.assertEqual(
            _run("resolve", "--well-known", "exe", registry="bogus"),
            (EXIT_OK, "application/octet-stream"),
        )

    def test_file(self) -> None:
        self.assertEqual(_run("file", "a/b/c.CSS"), (EXIT_OK, "text/css"))
        self.assertEqual(_run("file", "README"), (EXIT_MISS, ""))

    def test_extensions(self) -> None:
        self.assertEqual(_run("extensions", "video/webm"), (EXIT_OK, "webm"))
        self.assertEqual(_run("extensions", "video/*"), (EXIT_OK, "m4v\nmp4\nogm\nogv\nwebm"))
        self.assertEqual(_run("extensions", "*/*"), (EXIT_MISS, ""))

    def test_preferred_with_null_registry(self) -> None:
        self.assertEqual(_run("preferred", "text/plain"), (EXIT_MISS, ""))

    def test_match(self) -> None:
        self.assertEqual(_run("match", "text/*", "text/plain"), (EXIT_OK, "true"))
        self.assertEqual(_run("match", "text/*", "image/png"), (EXIT_MISS, "false"))

    def test_parse(self) -> None:
        self.assertEqual(_run("parse", "Text/HTML"), (EXIT_OK, "Text HTML"))
        self.assertEqual(_run("parse", "bogus"), (EXIT_MISS, ""))

    def test_top_level(self) -> None:
        self.assertEqual(_run("top-level", "x-foo"), (EXIT_OK, "true"))
        self.assertEqual(_run("top-level", "xy"), (EXIT_MISS, "false"))

    def test_multipart(self) -> None:
        code, out = _run("multipart", "--boundary", "XYZ", "--content-type", "b=text/plain", "a=1", "b=two")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(
            out,
            '--XYZ\r\nContent-Disposition: form-data; name="a"\r\n\r\n1\r\n'
            '--XYZ\r\nContent-Disposition: form-data; name="b"\r\nContent-Type: text/plain\r\n\r\ntwo\r\n'
            '--XYZ--\r\n',
        )

    def test_multipart_rejects_bad_field(self) -> None:
        self.assertEqual(_run("multipart", "--boundary", "XYZ", "novalue"), (EXIT_CONFIG, ""))

    def test_unknown_registry(self) -> None:
        self.assertEqual(_run("resolve", "html", registry="bogus"), (EXIT_CONFIG, ""))
        self.assertEqual(_run("--registry", "bogus", "resolve", "html"), (EXIT_CONFIG, ""))

    def test_registry_flag_overrides_settings(self) -> None:
        self.assertEqual(_run("--registry", "none", "resolve", "pdf", registry="bogus"), (EXIT_OK, "application/pdf"))

    def test_verbose_does_not_leak_into_later_runs(self) -> None:
        cli = MimeMatchCli(Settings(registry="none"))
        with patch.dict(os.environ, {"MIMEMATCH_TRACE_LOOKUPS": "0"}):
            self.assertEqual(cli.run(["-v", "match", "text/*", "text/html"]), (EXIT_OK, "true"))
            self.assertTrue(is_trace_enabled())

            self.assertEqual(cli.run(["match", "text/*", "text/html"]), (EXIT_OK, "true"))
            self.assertFalse(is_trace_enabled())
            self.assertEqual(logging.getLogger("mimematch").level, logging.WARNING)

            self.assertEqual(_run("match", "text/*", "text/html"), (EXIT_OK, "true"))
            self.assertFalse(is_trace_enabled())


class CliMainTests(unittest.TestCase):
    def _main(self, *argv: str):
        out = io.StringIO()
        with patch.dict(os.environ, {"MIMEMATCH_REGISTRY": "none"}), contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                main(list(argv))
        return ctx.exception.code, out.getvalue()

    def test_prints_and_exits(self) -> None:
        self.assertEqual(self._main("match", "*/*", "text/plain"), (0, "true\n"))
        self.assertEqual(self._main("resolve", "qqq"), (1, ""))

    def test_usage_error(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            code, _ = self._main("no-such-command")
        self.assertEqual(code, 2)


if __name__ == "__main__":
    unittest.main()
