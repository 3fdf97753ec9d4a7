#!/usr/bin/env python
"""
Thin wrapper script to invoke the commitwizard CLI.

Running ``python commitwizard.py`` is equivalent to running the
``commitwizard`` console script installed via ``pyproject.toml``.
"""

from commitwizard.cli import main


if __name__ == "__main__":
    main(prog_name="commitwizard")
