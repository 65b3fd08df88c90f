"""End-to-end scan orchestration.

Each file is parsed and evaluated independently; nothing is shared between
files except the read-only rule engine.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from paramguard.config import ParamGuardConfig
from paramguard.exceptions import ConfigParseError
from paramguard.model import ConfigTree, Finding, ScanReport, ScanResult
from paramguard.parsers import parse_config_file
from paramguard.rules import RuleEngine, load_bundled_rule_set, load_rule_set
from paramguard.scanner.discovery import discover_config_files

logger = logging.getLogger(__name__)


def scan_tree(tree: ConfigTree, engine: RuleEngine) -> list[Finding]:
    """Evaluate every loaded rule against an in-memory config tree."""
    return engine.run_all(tree)


def scan_file(path: Path, engine: RuleEngine) -> ScanResult:
    """Parse one config file and evaluate every rule against it.

    Raises ConfigParseError when the file cannot be turned into a tree.
    """
    tree = parse_config_file(path)
    findings = scan_tree(tree, engine)
    return ScanResult(file=str(path), findings=tuple(findings))


def scan_paths(
    paths: Iterable[Path],
    engine: RuleEngine,
    *,
    fail_fast: bool = True,
) -> ScanReport:
    """Scan files and directories, aggregating per-file results.

    With ``fail_fast`` the first parse failure propagates and aborts the run.
    Otherwise the failure is recorded on the report and scanning continues.
    """
    results: list[ScanResult] = []
    errors: list[tuple[str, str]] = []

    for path in discover_config_files(paths):
        try:
            result = scan_file(path, engine)
        except ConfigParseError as exc:
            if fail_fast:
                raise
            logger.warning("Skipping %s: %s", path, exc)
            errors.append((str(path), str(exc)))
            continue
        results.append(result)
        logger.info("Scanned %s: %d finding(s)", path, len(result.findings))

    return ScanReport(results=tuple(results), errors=tuple(errors))


def build_engine(config: ParamGuardConfig) -> RuleEngine:
    """Load the configured (or bundled) rule set and drop disabled rules."""
    rule_set = load_rule_set(config.rules_file) if config.rules_file is not None else load_bundled_rule_set()

    if config.disabled_rules:
        unknown = sorted(set(config.disabled_rules) - set(rule_set.rule_ids))
        for rule_id in unknown:
            logger.warning("Disabled rule '%s' is not defined in %s and will be ignored.", rule_id, rule_set.source)
        rule_set = rule_set.without(config.disabled_rules)

    return RuleEngine(rule_set)
