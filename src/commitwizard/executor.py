"""
Commit execution.

The rendered message is written to ``COMMIT_MESSAGE.txt`` inside a fresh
temporary directory and passed to ``git commit -F``; the message never
travels as a command-line argument. The directory is removed on every exit
path, including dry runs and failed commits.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import List, Sequence

import click

from commitwizard.vcs.git_client import GitClient, GitError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


MESSAGE_FILE_NAME = "COMMIT_MESSAGE.txt"
TEMP_DIR_PREFIX = "commitwizard-"


class CommitFailure(Exception):
    """Raised when ``git commit`` exits with a non-zero status."""

    def __init__(self, message: str, returncode: int = 1) -> None:
        super().__init__(message)
        self.returncode = returncode


def write_message_file(directory: Path, message: str) -> Path:
    """Write ``message`` verbatim as UTF-8 and return the file path."""
    path = directory / MESSAGE_FILE_NAME
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(message)
    return path


def format_command(message_file: Path, flags: Sequence[str]) -> str:
    return " ".join(["git", "commit", "-F", str(message_file)] + list(flags))


class CommitExecutor:
    """Create the commit from a rendered message."""

    def __init__(self, client: GitClient) -> None:
        self.client = client

    def execute(self, message: str, flags: Sequence[str] = (), dry_run: bool = False) -> None:
        """Commit ``message`` with the given flags.

        Parameters
        ----------
        message : str
            Complete commit message.
        flags : Sequence[str]
            Extra ``git commit`` flags, appended in the given order.
        dry_run : bool
            Print the command and the message instead of committing.

        Raises
        ------
        CommitFailure
            If ``git commit`` fails.
        """
        flag_list: List[str] = list(flags)
        with tempfile.TemporaryDirectory(prefix=TEMP_DIR_PREFIX) as tmp:
            message_file = write_message_file(Path(tmp), message)
            logger.debug("Wrote commit message to %s", message_file)

            if dry_run:
                click.echo("Dry run - would execute:")
                click.echo(format_command(message_file, flag_list))
                click.echo("\nCommit message:\n")
                click.echo(message)
                return

            try:
                self.client.commit(message_file, flag_list)
            except GitError as exc:
                raise CommitFailure(str(exc), returncode=exc.returncode or 1) from exc
