"""CLI entry point: python -m neontycoon <command>"""

from neontycoon.cli import main

if __name__ == "__main__":
    main()
