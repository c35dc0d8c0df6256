import io
import json
import logging
import unittest

import mimematch
from mimematch.logging import DefaultLoggerFactory, JsonLogFormatter, get_logger, setup_base_logger, trace_lookup
from mimematch.logging.helpers import is_trace_enabled, set_trace_enabled
from mimematch.platform.mimetypes_registry import MimetypesPlatformRegistry


class LoggerNamingTests(unittest.TestCase):
    def test_namespacing(self) -> None:
        self.assertEqual(get_logger().name, "mimematch")
        self.assertEqual(get_logger("mimematch").name, "mimematch")
        self.assertEqual(get_logger("resolver").name, "mimematch.resolver")
        self.assertEqual(get_logger("mimematch.cli").name, "mimematch.cli")

    def test_factory_returns_namespaced_logger(self) -> None:
        factory = DefaultLoggerFactory(level=logging.WARNING, stream=io.StringIO())
        self.assertEqual(factory.get_logger("platform").name, "mimematch.platform")

    def test_factory_from_settings_enables_trace(self) -> None:
        from mimematch.config import Settings

        set_trace_enabled(None)
        factory = DefaultLoggerFactory.from_settings(Settings(trace_lookups=True), stream=io.StringIO())
        self.assertTrue(is_trace_enabled())
        self.assertEqual(factory.get_logger("cli").name, "mimematch.cli")

    def test_factory_from_settings_clears_earlier_trace(self) -> None:
        from unittest.mock import patch

        from mimematch.config import Settings

        DefaultLoggerFactory.from_settings(Settings(trace_lookups=True), stream=io.StringIO())
        with patch.dict("os.environ", {"MIMEMATCH_TRACE_LOOKUPS": "0"}):
            DefaultLoggerFactory.from_settings(Settings(), stream=io.StringIO())
            self.assertFalse(is_trace_enabled())
        with patch.dict("os.environ", {"MIMEMATCH_TRACE_LOOKUPS": "1"}):
            self.assertTrue(is_trace_enabled())

    def test_setup_base_logger_is_idempotent(self) -> None:
        base = setup_base_logger(level=logging.WARNING, stream=io.StringIO())
        handlers = list(base.handlers)
        again = setup_base_logger(level=logging.ERROR)
        self.assertIs(base, again)
        self.assertEqual(list(again.handlers), handlers)
        self.assertEqual(again.level, logging.ERROR)
        self.assertFalse(again.propagate)


class JsonFormatterTests(unittest.TestCase):
    def test_payload(self) -> None:
        record = logging.LogRecord("mimematch.resolver", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        record.context = {"ext": "html"}
        payload = json.loads(JsonLogFormatter().format(record))
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["module"], "mimematch.resolver")
        self.assertEqual(payload["msg"], "hello world")
        self.assertEqual(payload["version"], mimematch.__version__)
        self.assertEqual(payload["ctx"], {"ext": "html"})
        self.assertTrue(payload["ts"].endswith("Z"))

    def test_payload_without_context(self) -> None:
        record = logging.LogRecord("mimematch", logging.WARNING, __file__, 1, "plain", (), None)
        self.assertNotIn("ctx", json.loads(JsonLogFormatter().format(record)))


class TraceLookupTests(unittest.TestCase):
    def tearDown(self) -> None:
        set_trace_enabled(None)

    def test_disabled_by_default(self) -> None:
        set_trace_enabled(False)
        log = get_logger("trace-test")
        with self.assertNoLogs(log, level="DEBUG"):
            trace_lookup(log, "lookup", extension="html")

    def test_platform_lookups_are_traced(self) -> None:
        set_trace_enabled(True)
        self.assertTrue(is_trace_enabled())
        registry = MimetypesPlatformRegistry(use_system_files=False, logger=get_logger("platform"))
        with self.assertLogs("mimematch.platform", level="DEBUG") as captured:
            registry.lookup_extension("json")
            registry.lookup_type("application/json")
        joined = "\n".join(captured.output)
        self.assertIn("platform extension lookup", joined)
        self.assertIn("platform type lookup", joined)
        self.assertIn("application/json", joined)


if __name__ == "__main__":
    unittest.main()
