"""ramp-tool: contrast-targeted colour ramps from a single seed colour.

Usage: uv run ramp-tool <command> [options]

Commands are auto-discovered from ramp_tool/commands/.
Each command module's docstring is its documentation.
Run `ramp-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, ramp-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import logging
import sys

from ramp_tool import registry
from ramp_tool.core.env import load_env, settings_from_env
from ramp_tool.core.errors import RampToolError
from ramp_tool.core.report import format_json, format_text
from ramp_tool.core.types import Report


def _short_doc(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  ramp-tool ramp '#0066ff'\n"
        "  ramp-tool ramp '#0066ff' --flavour stone --name Blue --json\n"
        "  ramp-tool ramp '#0066ff' --peak-chroma 80 --peak 500 --falloff steep\n"
        "  ramp-tool ramp '#0066ff' --png ./tmp/blue.png --fail-on-miss=0.15\n"
        '  ramp-tool curve --peak-chroma 100 --peak 400\n'
        "  ramp-tool inspect '#2563eb'\n"
        '  ramp-tool sweep --hues 36\n'
        '  ramp-tool help ramp\n'
        '\n'
        'Settings (set in .env or environment, CLI flags win):\n'
        '  RAMP_TOOL_FLAVOUR          bright | stone | concrete\n'
        '  RAMP_TOOL_TOLERANCE        solver contrast tolerance (default 0.1)\n'
        '  RAMP_TOOL_MAX_ITERATIONS   solver iteration budget (default 10)\n'
        '  RAMP_TOOL_LOG_LEVEL        DEBUG | INFO | WARNING | ERROR\n'
    )
    parser = argparse.ArgumentParser(
        prog='ramp-tool',
        description='Contrast-targeted colour ramps from a single seed colour.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name))
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        cmd.add_arguments(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<10} {_short_doc(name)}')
        print('\nRun: ramp-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _check_fail_on_miss(report: Report, threshold: float) -> bool:
    """Return True if any step missed its contrast target by more than threshold."""
    failures = []
    for step, data in report.steps.items():
        delta = data.get('delta')
        if delta is not None and delta > threshold:
            failures.append((step, delta))

    if failures:
        print(f'\nFAIL: {len(failures)} step(s) missed their contrast target by more than {threshold}:')
        for step, delta in failures:
            print(f'  {step}: Δ={delta}')
        return True
    return False


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else, OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'ramp-tool: loaded {env_path}', file=sys.stderr)

    try:
        env = settings_from_env()
    except RampToolError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
    _configure_logging(logging.DEBUG if args.verbose else env.log_level)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    args.env_settings = env
    report = Report()
    try:
        registry.get(args.command).execute(args, report)
    except RampToolError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate, after output so the report is visible even on failure
    threshold = getattr(args, 'fail_on_miss', None)
    if threshold is not None and _check_fail_on_miss(report, threshold):
        sys.exit(1)


if __name__ == '__main__':
    main()
