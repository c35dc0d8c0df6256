import logging
import unittest

import pytest

from mimematch import MimetypesPlatformRegistry, NullPlatformRegistry, RegistryConfigError
from mimematch.config import DEFAULT_REGISTRY, Settings
from mimematch.plugins import registry as plugin_registry
from mimematch.plugins.registry import (
    build_platform_registry,
    get_platform_registry_factory,
    load_object_from_ref,
    register_platform_registry,
)


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        self.assertEqual(settings.registry, DEFAULT_REGISTRY)
        self.assertFalse(settings.json_logs)
        self.assertEqual(settings.log_level, logging.WARNING)
        self.assertFalse(settings.trace_lookups)

    def test_from_env(self) -> None:
        settings = Settings.from_env({
            "MIMEMATCH_REGISTRY": " none ",
            "MIMEMATCH_JSON_LOGS": "1",
            "MIMEMATCH_LOG_LEVEL": "debug",
            "MIMEMATCH_TRACE_LOOKUPS": "1",
        })
        self.assertEqual(settings, Settings("none", True, logging.DEBUG, True))

    def test_bad_level_falls_back_to_warning(self) -> None:
        self.assertEqual(Settings.from_env({"MIMEMATCH_LOG_LEVEL": "chatty"}).log_level, logging.WARNING)

    def test_blank_registry_uses_default(self) -> None:
        self.assertEqual(Settings.from_env({"MIMEMATCH_REGISTRY": "  "}).registry, DEFAULT_REGISTRY)

    def test_merged_overrides_only_given_fields(self) -> None:
        base = Settings(registry="none", json_logs=True)
        self.assertEqual(base.merged(), base)
        self.assertEqual(base.merged(registry="system").registry, "system")
        self.assertFalse(base.merged(json_logs=False).json_logs)
        self.assertEqual(base.merged(log_level=logging.DEBUG).log_level, logging.DEBUG)


class PluginRegistryTests(unittest.TestCase):
    def tearDown(self) -> None:
        plugin_registry._FACTORIES.pop("fake-platform", None)

    def test_builtin_names(self) -> None:
        self.assertIsInstance(build_platform_registry("none"), NullPlatformRegistry)
        self.assertIsInstance(build_platform_registry(" NONE "), NullPlatformRegistry)
        self.assertIsInstance(build_platform_registry("system"), MimetypesPlatformRegistry)

    def test_register_custom_factory(self) -> None:
        register_platform_registry("Fake-Platform", NullPlatformRegistry)
        self.assertIs(get_platform_registry_factory("fake-platform"), NullPlatformRegistry)
        self.assertIsInstance(build_platform_registry("fake-platform"), NullPlatformRegistry)

    def test_register_requires_name(self) -> None:
        with self.assertRaises(ValueError):
            register_platform_registry("  ", NullPlatformRegistry)

    def test_module_reference(self) -> None:
        registry = build_platform_registry("mimematch.platform.mimetypes_registry:NullPlatformRegistry")
        self.assertIsInstance(registry, NullPlatformRegistry)

    def test_unknown_name(self) -> None:
        with self.assertRaises(RegistryConfigError) as ctx:
            build_platform_registry("bogus")
        self.assertEqual(ctx.exception.ref, "bogus")

    def test_unresolvable_references(self) -> None:
        for ref in ("no_such_module_xyz:Thing", "mimematch.errors:Missing", "os:sep", "builtins:object"):
            with self.subTest(ref=ref):
                with self.assertRaises(RegistryConfigError):
                    build_platform_registry(ref)


def test_load_object_from_ref_validates_shape():
    with pytest.raises(RegistryConfigError):
        load_object_from_ref("no-colon")
    with pytest.raises(RegistryConfigError):
        load_object_from_ref("module:")
    assert load_object_from_ref("mimematch.config:Settings") is Settings


def test_registry_config_error_is_value_error():
    err = RegistryConfigError("x", "why")
    assert isinstance(err, ValueError)
    assert "why" in str(err)
