"""Module entrypoint for running textfold as ``python -m textfold``."""

from __future__ import annotations

from textfold.cli import main


if __name__ == "__main__":
    main()
