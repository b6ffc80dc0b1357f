#!/usr/bin/env python3
"""
themeengine CLI - render and inspect theme templates from the command line
"""
import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from themeengine.config import ThemeConfig
from themeengine.engine import ThemeEngine
from themeengine.exceptions import TemplateNotFound, ThemeEngineError
from themeengine.log import configure_logging


class CommandRegistry:
    """Registry for CLI commands with validation and execution logic"""

    def __init__(self):
        self.commands: Dict[str, Dict[str, Callable]] = {}

    def register(self, name: str, validator: Callable = None, executor: Callable = None):
        """Register a command directly or as a decorator"""
        if executor is not None:
            self.commands[name] = {'validator': validator, 'executor': executor}
            return executor

        def decorator(func):
            self.commands[name] = {'validator': validator, 'executor': func}
            return func
        return decorator

    def execute(self, name: str, args: Any) -> int:
        """Execute a command, returning its exit status"""
        command = self.commands[name]

        if command['validator']:
            errors = command['validator'](args)
            if errors:
                for error in errors:
                    print(f"error: {error}", file=sys.stderr)
                return 2

        return command['executor'](args) or 0


def parse_params(pairs: List[str]) -> Dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a dict"""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep or not key:
            raise ValueError(f"Invalid parameter {pair!r}, expected KEY=VALUE")
        params[key] = value
    return params


def _validate_params(args) -> List[str]:
    try:
        parse_params(args.param)
    except ValueError as exc:
        return [str(exc)]
    return []


class ThemeEngineCLI:
    """Command Line Interface for the theme engine"""

    def __init__(self):
        self.registry = CommandRegistry()
        self.parser = self._create_parser()
        self._register_commands()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='themeengine',
            description="Theme template renderer",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""Examples:
  themeengine --themes-root themes --theme dark render pages.home --param title=Home
  themeengine --theme dark resolve partials/header
  themeengine --cache-path /tmp/themeengine_cache cache-clear
            """
        )

        defaults = ThemeConfig()
        parser.add_argument('--themes-root', default=str(defaults.themes_root),
                            help='Directory containing the themes')
        parser.add_argument('--theme', default=defaults.active_theme, help='Active theme name')
        parser.add_argument('--cache', action=argparse.BooleanOptionalAction,
                            default=defaults.cache_enabled, help='Mirror templates into the cache directory')
        parser.add_argument('--cache-path', default=str(defaults.cache_path), help='Cache directory')
        parser.add_argument('--extension', default=defaults.extension, help='Template file extension')
        parser.add_argument('--log-level', default='WARNING',
                            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
        parser.add_argument('--log-format', default='structured', choices=['structured', 'json'])

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        render_parser = subparsers.add_parser('render', help='Render a template to stdout')
        render_parser.add_argument('template', help='Template name (e.g. pages.home)')
        render_parser.add_argument('--param', '-p', action='append', default=[], metavar='KEY=VALUE',
                                   help='Template parameter, may be repeated')
        render_parser.add_argument('--base-url', default=defaults.base_url, help='Base URL used for asset links')

        resolve_parser = subparsers.add_parser('resolve', help='Print the file a template name resolves to')
        resolve_parser.add_argument('template', help='Template name')

        subparsers.add_parser('cache-clear', help='Remove cached template files')

        return parser

    def _register_commands(self):
        self.registry.register('render', _validate_params, self.cmd_render)
        self.registry.register('resolve', executor=self.cmd_resolve)
        self.registry.register('cache-clear', executor=self.cmd_cache_clear)

    def _engine(self, args) -> ThemeEngine:
        return ThemeEngine.from_config(ThemeConfig(
            themes_root=args.themes_root,
            active_theme=args.theme,
            cache_enabled=args.cache,
            cache_path=args.cache_path,
            extension=args.extension,
            base_url=getattr(args, 'base_url', None),
        ))

    def cmd_render(self, args) -> int:
        """Render a template"""
        engine = self._engine(args)
        sys.stdout.write(engine.render(args.template, parse_params(args.param)))
        return 0

    def cmd_resolve(self, args) -> int:
        """Show where a template name resolves"""
        engine = self._engine(args)
        try:
            print(engine.resolver.resolve(args.template))
        except TemplateNotFound as exc:
            print(f"Template not found: {exc.name}", file=sys.stderr)
            for candidate in exc.candidates:
                print(f"  tried {candidate}", file=sys.stderr)
            return 1
        return 0

    def cmd_cache_clear(self, args) -> int:
        """Remove cached templates"""
        engine = self._engine(args)
        removed = engine.cache.clear()
        print(f"Removed {removed} cached template(s) from {engine.cache.cache_dir}")
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI"""
        args = self.parser.parse_args(argv)

        if not args.command:
            self.parser.print_help()
            return 0

        configure_logging(args.log_level, args.log_format)

        try:
            return self.registry.execute(args.command, args)
        except ThemeEngineError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""
    sys.exit(ThemeEngineCLI().run(argv))


if __name__ == '__main__':
    main()
