"""Convenience entry point to run the yap CLI.

Allows starting the application with `python main.py <command>` from the project root.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the src/ directory is on sys.path so `import yap` works
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from yap.frontend.cli.app import main as cli_main


def main() -> None:
    """Run the yap command line interface."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
