"""CLI entrypoint for ParamGuard scanner."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from paramguard import __version__
from paramguard.config import ParamGuardConfig, load_config
from paramguard.constants.branding import CLI_DESCRIPTION
from paramguard.constants.checks import KNOWN_CHECK_TYPES
from paramguard.constants.reporting import SEVERITY_ORDER, SEVERITY_RANK, VALID_OUTPUT_FORMATS
from paramguard.exceptions import ConfigError, ConfigParseError, RuleLoadError
from paramguard.reporting import OutputFilters, StdoutReporter, filter_report, render_json, write_json_report
from paramguard.rules import RuleSet
from paramguard.scanner import build_engine, scan_paths


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="paramguard",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s v{__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Scan configuration files for security issues")
    scan.add_argument("paths", nargs="+", type=Path, help="Config files or directories to scan")
    scan.add_argument("-R", "--rules", type=Path, default=None, help="Path to custom rules file (default: bundled)")
    scan.add_argument(
        "-f",
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=None,
        help="Output format: text or json (default: text)",
    )
    scan.add_argument("-o", "--output", type=Path, default=None, help="Also write the JSON report to this file")
    scan.add_argument(
        "--min-severity",
        type=str.upper,
        choices=list(SEVERITY_ORDER),
        default=None,
        help="Hide findings below this severity",
    )
    scan.add_argument("-c", "--config", type=Path, default=None, help="Explicit settings file")
    scan.add_argument(
        "-k",
        "--keep-going",
        action="store_true",
        help="Continue with remaining files when one cannot be parsed",
    )
    scan.add_argument("--no-color", action="store_true", help="Disable colored output")
    scan.add_argument("-v", "--verbose", action="store_true", help="Show debug logging and rule categories")

    validate = subparsers.add_parser("validate-rules", help="Load a rules file and report suspicious entries")
    validate.add_argument("-R", "--rules", type=Path, default=None, help="Path to rules file (default: bundled)")
    validate.add_argument("-c", "--config", type=Path, default=None, help="Explicit settings file")
    validate.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    subparsers.add_parser("version", help="Print version information")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "version":
        print(f"paramguard v{__version__}")
        return 0

    if args.command == "validate-rules":
        return _handle_validate_rules(args)

    if args.command != "scan":
        parser.error(f"Unsupported command: {args.command}")

    return _handle_scan(args)


def _handle_scan(args: argparse.Namespace) -> int:
    """Run a scan; exit 1 when findings are shown or a file failed, 2 on setup errors."""
    try:
        settings = _resolve_settings(args)
        engine = build_engine(settings)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except RuleLoadError as exc:
        print(f"Error loading rules: {exc}", file=sys.stderr)
        return 2

    try:
        report = scan_paths(args.paths, engine, fail_fast=settings.fail_fast)
    except ConfigParseError as exc:
        print(f"Error scanning: {exc}", file=sys.stderr)
        return 1

    shown = filter_report(report, OutputFilters(min_severity=settings.min_severity))

    if args.output is not None:
        try:
            write_json_report(args.output, shown)
        except OSError as exc:
            print(f"Error writing report to {args.output}: {exc}", file=sys.stderr)
            return 1

    if settings.output_format == "json":
        print(render_json(shown))
    else:
        use_color = settings.color and not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(shown, color=use_color, verbose=args.verbose).render())

    return 1 if shown.has_findings or shown.errors else 0


def _resolve_settings(args: argparse.Namespace) -> ParamGuardConfig:
    """Merge the settings file with CLI flags; flags win."""
    settings = load_config(args.config)
    overrides: dict[str, object] = {}
    if args.rules is not None:
        overrides["rules_file"] = args.rules
    if args.format is not None:
        overrides["output_format"] = args.format
    if args.min_severity is not None:
        overrides["min_severity"] = args.min_severity
    if args.keep_going:
        overrides["fail_fast"] = False
    return replace(settings, **overrides) if overrides else settings  # type: ignore[arg-type]


def _handle_validate_rules(args: argparse.Namespace) -> int:
    """Load rules and report entries that will be skipped or look unconventional."""
    try:
        settings = load_config(args.config)
        if args.rules is not None:
            settings = replace(settings, rules_file=args.rules)
        rule_set = build_engine(settings).rule_set
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except RuleLoadError as exc:
        print(f"Error loading rules: {exc}", file=sys.stderr)
        return 2

    for warning in _rule_set_warnings(rule_set):
        print(f"warning: {warning}", file=sys.stderr)
    print(f"Rules are valid: {len(rule_set)} rule(s) loaded.")
    return 0


def _rule_set_warnings(rule_set: RuleSet) -> list[str]:
    """Semantic hints only; none of these prevent loading."""
    warnings: list[str] = []
    seen: set[str] = set()
    for rule in rule_set.rules:
        if rule.id in seen:
            warnings.append(f"duplicate rule id '{rule.id}'")
        seen.add(rule.id)
        if rule.check.kind not in KNOWN_CHECK_TYPES:
            warnings.append(f"rule '{rule.id}' has unrecognized check type {rule.check.kind!r} and will never fire")
        if rule.severity.upper() not in SEVERITY_RANK:
            warnings.append(f"rule '{rule.id}' has unconventional severity {rule.severity!r}")
    return warnings


if __name__ == "__main__":
    raise SystemExit(main())
