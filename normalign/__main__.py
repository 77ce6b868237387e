"""Module entrypoint for running normalign as ``python -m normalign``."""

from __future__ import annotations

from normalign.cli import main


if __name__ == "__main__":
    main()
