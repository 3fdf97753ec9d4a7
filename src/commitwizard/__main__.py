"""Allow ``python -m commitwizard``."""

from commitwizard.cli import main


if __name__ == "__main__":
    main(prog_name="commitwizard")
