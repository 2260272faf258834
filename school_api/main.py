"""Main entry point for school-api.

``python -m school_api.main --server`` runs the API server; any other
arguments are handed to the management CLI.
"""

from __future__ import annotations

import sys


def main() -> None:
    from school_api.cli.main import main as cli_main

    if "--server" in sys.argv:
        sys.argv.remove("--server")
        sys.argv.insert(1, "serve")
    cli_main()


if __name__ == "__main__":
    main()
