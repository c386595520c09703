"""Module entrypoint for running Sorbet as ``python -m sorbet``."""

from __future__ import annotations

from sorbet.cli import main


if __name__ == "__main__":
    main()
