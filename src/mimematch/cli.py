from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from typing import Callable, Dict, List, NoReturn, Optional, Sequence, Tuple

from mimematch.config import Settings
from mimematch.core.models import MultipartField
from mimematch.logging.factory import DefaultLoggerFactory
from mimematch.logging.helpers import get_logger
from mimematch.matching.pattern import matches
from mimematch.multipart.encoding import build_multipart_body
from mimematch.parsing.type_string import is_valid_top_level, parse_type
from mimematch.platform.mimetypes_registry import NullPlatformRegistry
from mimematch.plugins.registry import build_platform_registry
from mimematch.resolution.resolver import ExtensionResolver

logger = get_logger('cli')

EXIT_OK = 0
EXIT_MISS = 1
EXIT_CONFIG = 2

CommandResult = Tuple[int, str]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='mimematch',
        description='mimematch – resolve, enumerate and match MIME types',
    )
    p.add_argument(
        '--registry',
        metavar='REF',
        help=(
            "Platform registry: 'system', 'none', a registered plugin name or "
            "'module.path:AttrName'. Defaults to $MIMEMATCH_REGISTRY or 'system'."
        ),
    )
    p.add_argument('--json-logs', action='store_true', default=None, help='Emit JSON log lines.')
    p.add_argument('-v', '--verbose', action='store_true', help='Debug logging, including platform lookups.')

    sub = p.add_subparsers(dest='command', metavar='COMMAND')
    sub.required = True

    s = sub.add_parser('resolve', help='Content type for a file extension.')
    s.add_argument('extension')
    s.add_argument('--well-known', action='store_true', help='Ignore the platform registry.')

    s = sub.add_parser('file', help='Content type for a file path.')
    s.add_argument('path')
    s.add_argument('--well-known', action='store_true', help='Ignore the platform registry.')

    s = sub.add_parser('extensions', help='Extensions for a type or a prefix/* group.')
    s.add_argument('content_type')

    s = sub.add_parser('preferred', help="The platform's preferred extension for a type.")
    s.add_argument('content_type')

    s = sub.add_parser('match', help='Test a type against a pattern.')
    s.add_argument('pattern')
    s.add_argument('candidate')

    s = sub.add_parser('parse', help='Split a type into top-level and subtype.')
    s.add_argument('type_string')

    s = sub.add_parser('top-level', help='Check a top-level type token.')
    s.add_argument('token')

    s = sub.add_parser('multipart', help='Format a multipart/form-data body.')
    s.add_argument('--boundary', required=True)
    s.add_argument('fields', nargs='*', metavar='NAME=VALUE')
    s.add_argument(
        '--content-type',
        action='append',
        default=[],
        metavar='NAME=TYPE',
        help='Content-Type for the field NAME (repeatable).',
    )
    return p


def _configure_logging(settings: Settings) -> None:
    factory = DefaultLoggerFactory.from_settings(settings)
    global logger
    logger = factory.get_logger('cli')


def _bool_result(flag: bool) -> CommandResult:
    return (EXIT_OK if flag else EXIT_MISS, 'true' if flag else 'false')


def _optional_result(value: Optional[str]) -> CommandResult:
    return (EXIT_OK, value) if value else (EXIT_MISS, '')


def _split_assignments(items: Sequence[str], what: str) -> List[Tuple[str, str]]:
    out: List[Tuple[str, str]] = []
    for item in items:
        name, sep, value = item.partition('=')
        if not sep or not name:
            raise ValueError(f'{what} must look like NAME=VALUE, got {item!r}')
        out.append((name, value))
    return out


def _cmd_multipart(ns: argparse.Namespace) -> CommandResult:
    ctypes = dict(_split_assignments(ns.content_type, '--content-type'))
    fields = [
        MultipartField(name, value, ctypes.get(name, ''))
        for name, value in _split_assignments(ns.fields, 'field')
    ]
    return (EXIT_OK, build_multipart_body(ns.boundary, fields))


class MimeMatchCli:
    """Command-style façade; `run` returns (exit_code, output) without printing."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._base_settings = settings or Settings.from_env()
        self._settings = self._base_settings
        self._resolver: Optional[ExtensionResolver] = None

    def _platform_resolver(self) -> ExtensionResolver:
        if self._resolver is None:
            self._resolver = ExtensionResolver(build_platform_registry(self._settings.registry))
        return self._resolver

    def _resolver_for(self, well_known: bool) -> ExtensionResolver:
        return ExtensionResolver(NullPlatformRegistry()) if well_known else self._platform_resolver()

    def _dispatch(self, ns: argparse.Namespace) -> CommandResult:
        commands: Dict[str, Callable[[], CommandResult]] = {
            'resolve': lambda: _optional_result(
                self._resolver_for(ns.well_known).resolve_extension(ns.extension, not ns.well_known)),
            'file': lambda: _optional_result(
                self._resolver_for(ns.well_known).resolve_file(ns.path, not ns.well_known)),
            'extensions': lambda: self._extensions(ns.content_type),
            'preferred': lambda: _optional_result(
                self._platform_resolver().preferred_extension_for_type(ns.content_type)),
            'match': lambda: _bool_result(matches(ns.pattern, ns.candidate)),
            'parse': lambda: self._parse(ns.type_string),
            'top-level': lambda: _bool_result(is_valid_top_level(ns.token)),
            'multipart': lambda: _cmd_multipart(ns),
        }
        return commands[ns.command]()

    def _extensions(self, content_type: str) -> CommandResult:
        found = sorted(self._platform_resolver().extensions_for_type(content_type))
        return (EXIT_OK if found else EXIT_MISS, '\n'.join(found))

    @staticmethod
    def _parse(type_string: str) -> CommandResult:
        parsed = parse_type(type_string)
        if parsed is None:
            return (EXIT_MISS, '')
        return (EXIT_OK, f'{parsed.top_level} {parsed.subtype}')

    def run(self, argv: Sequence[str]) -> CommandResult:
        ns = _build_parser().parse_args(list(argv))
        self._settings = self._base_settings.merged(
            registry=ns.registry,
            json_logs=ns.json_logs,
            log_level=logging.DEBUG if ns.verbose else None,
        )
        if ns.verbose:
            self._settings = replace(self._settings, trace_lookups=True)
        _configure_logging(self._settings)
        self._resolver = None

        try:
            return self._dispatch(ns)
        except ValueError as exc:
            # RegistryConfigError and malformed NAME=VALUE arguments.
            logger.error('%s', exc)
            return (EXIT_CONFIG, '')


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `mimematch` script and `python -m mimematch`."""
    try:
        code, output = MimeMatchCli().run(sys.argv[1:] if argv is None else argv)
        if output:
            sys.stdout.write(output if output.endswith('\n') else output + '\n')
        raise SystemExit(code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
