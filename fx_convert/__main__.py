"""Allow ``python -m fx_convert``."""

from __future__ import annotations

import sys

from fx_convert.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
