"""
Staging coordination for the commit wizard.

Before any commit question is asked the wizard makes sure the index holds
something to commit. In the default mode an existing staged set is left
alone and an empty one can be filled with ``git add -A``. In pick mode the
user chooses individual files from the porcelain status. Clean early exits
are signalled with :class:`StagingAbort` subclasses carrying the message
to show.
"""

from __future__ import annotations

import logging
from typing import Any, List

from commitwizard.vcs.git_client import GitClient
from commitwizard.vcs.status_parser import parse_status


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class StagingAbort(Exception):
    """Base class for clean, user-facing early exits (exit status 0)."""

    pass


class NothingToCommitError(StagingAbort):
    """Raised when there is nothing staged and nothing to stage."""

    pass


class UserAbortedError(StagingAbort):
    """Raised when the user declines a confirmation required to proceed."""

    pass


class StagingCoordinator:
    """Decide what gets staged before the commit message is collected.

    Parameters
    ----------
    client : GitClient
        Git client used for queries and staging.
    backend : object
        Prompt backend providing ``confirm`` and ``checkbox``.
    stage_all_default : bool
        Default answer of the "stage all changes?" confirmation.
    """

    def __init__(self, client: GitClient, backend: Any, stage_all_default: bool = True) -> None:
        self.client = client
        self.backend = backend
        self.stage_all_default = stage_all_default

    def prepare(self, pick: bool = False) -> List[str]:
        """Run the staging flow for the selected mode.

        Returns
        -------
        List[str]
            The staged paths once the flow completes.

        Raises
        ------
        StagingAbort
            When there is nothing to commit or the user declines to go on.
        """
        if pick:
            self.pick_and_stage()
        else:
            self.stage_all_if_needed()
        return self.ensure_staged()

    def stage_all_if_needed(self) -> None:
        staged = self.client.get_staged_files()
        if staged:
            logger.debug("Keeping %d already staged file(s)", len(staged))
            return

        lines = self.client.get_status_lines()
        if not lines:
            raise NothingToCommitError("No changes to commit.")

        stage_all = self.backend.confirm(
            "No staged changes found. Stage all changes (git add -A)?",
            default=self.stage_all_default,
        )
        if not stage_all:
            raise UserAbortedError("Nothing staged. Aborting.")

        logger.debug("Staging all %d changed path(s)", len(lines))
        self.client.stage_all()

    def pick_and_stage(self) -> None:
        lines = self.client.get_status_lines()
        if not lines:
            raise NothingToCommitError("No changes to pick from.")

        entries = parse_status(lines)
        selected = self.backend.checkbox(
            "Select files to stage (Space to toggle, Enter to confirm)",
            [(entry.label, entry.path) for entry in entries],
        )

        if selected:
            logger.debug("Staging %d selected path(s)", len(selected))
            self.client.stage_paths(selected)
            return

        if self.client.get_staged_files():
            return

        keep_going = self.backend.confirm(
            "No files selected and nothing staged. Continue anyway?",
            default=False,
        )
        if not keep_going:
            raise UserAbortedError("Aborting.")

    def ensure_staged(self) -> List[str]:
        """Return the staged paths, raising if there are none."""
        staged = self.client.get_staged_files()
        if not staged:
            raise NothingToCommitError("No staged changes detected. Stage files and try again.")
        return staged
