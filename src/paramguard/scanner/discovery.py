"""Expand scan targets into a deterministic list of config files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from paramguard.parsers import detect_format

logger = logging.getLogger(__name__)


def discover_config_files(targets: Iterable[Path]) -> list[Path]:
    """Return scan targets with directories expanded to supported config files.

    Explicit file targets are kept as given, even when missing or of an
    unrecognized format, so that the parse step can report them. Directory
    members are included only when their format is recognized.
    """
    discovered: list[Path] = []
    seen: set[Path] = set()

    for target in targets:
        if target.is_dir():
            members = sorted(path for path in target.rglob("*") if path.is_file() and detect_format(path))
            logger.debug("Discovered %d config file(s) under %s", len(members), target)
        else:
            members = [target]

        for path in members:
            key = path.resolve()
            if key in seen:
                continue
            seen.add(key)
            discovered.append(path)

    return discovered
