"""Allow ``python -m paramguard``."""

from __future__ import annotations

from paramguard.cli.main import main

raise SystemExit(main())
