"""Allow ``python -m graphgate``."""

from __future__ import annotations

from graphgate.cli.main import main

raise SystemExit(main())
