"""Main entry point for running shuntcalc_pkg as a module.

This allows running shuntcalc with:
    python -m shuntcalc_pkg -e "2 + 3 * 4"
    python -m shuntcalc_pkg --postfix -e "(2 + 3) * 4"
    python -m shuntcalc_pkg --health-check

This is equivalent to running:
    python -m shuntcalc_pkg.cli
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
