"""
Git client implementation for commitwizard.

This module wraps the handful of Git operations the wizard needs:
checking for a working tree, reading the porcelain status and the staged
file list, staging changes and creating the commit. Query commands have
their output captured; mutating commands (``add`` and ``commit``) inherit
the terminal so that hooks and editors behave exactly as they do when Git
is run by hand. All subprocess calls go through two small helpers so that
unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class GitError(Exception):
    """Raised when a Git command fails."""

    def __init__(self, message: str, returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a Git work tree."""

    pass


class GitClient:
    """Client for interacting with a Git working tree."""

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = repo_root or Path.cwd()

    # ------------------------------------------------------------------
    # Process helpers
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command and capture its output.

        Raises
        ------
        GitError
            If the executable cannot be launched, or if the command exits
            with a non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as e:
            logger.error("Git executable not found: %s", e)
            raise GitError("git executable not found on PATH") from e

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(
                result.stderr.strip() or result.stdout.strip(),
                returncode=result.returncode,
            )
        return result

    def _run_attached(self, args: List[str]) -> None:
        """Run a Git command with stdin/stdout/stderr attached to the terminal.

        Git prints its own diagnostics, so on failure only the exit status
        is carried by the raised :class:`GitError`.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command (attached): %s", " ".join(full_cmd))
        try:
            result = subprocess.run(full_cmd, cwd=self.repo_root)
        except FileNotFoundError as e:
            logger.error("Git executable not found: %s", e)
            raise GitError("git executable not found on PATH") from e

        if result.returncode != 0:
            logger.error("Git command failed with exit status %d: %s", result.returncode, " ".join(full_cmd))
            raise GitError(
                f"git {args[0]} exited with status {result.returncode}",
                returncode=result.returncode,
            )

    # ------------------------------------------------------------------
    # Repository detection
    # ------------------------------------------------------------------
    def is_inside_work_tree(self) -> bool:
        """Return True if ``repo_root`` lies inside a Git working tree."""
        try:
            result = self._run(["rev-parse", "--is-inside-work-tree"], check=False)
        except GitError:
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def ensure_repository(self) -> None:
        """Raise :class:`NotARepositoryError` unless inside a working tree."""
        if not self.is_inside_work_tree():
            raise NotARepositoryError(f"not inside a git repository: {self.repo_root}")

    def get_toplevel(self) -> Path:
        """Return the root directory of the working tree."""
        result = self._run(["rev-parse", "--show-toplevel"], check=True)
        return Path(result.stdout.strip())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_status_lines(self) -> List[str]:
        """Return the non-empty lines of ``git status --porcelain``.

        Lines are returned verbatim; the leading status column is
        significant and must not be stripped.
        """
        result = self._run(["status", "--porcelain"], check=True)
        return [line for line in result.stdout.splitlines() if line.strip()]

    def get_staged_files(self) -> List[str]:
        """Return the paths currently staged in the index."""
        result = self._run(["diff", "--cached", "--name-only"], check=True)
        return [line for line in result.stdout.splitlines() if line.strip()]

    # ------------------------------------------------------------------
    # Staging and committing
    # ------------------------------------------------------------------
    def stage_all(self) -> None:
        """Stage every working tree change (``git add -A``)."""
        self._run_attached(["add", "-A"])

    def stage_paths(self, paths: Sequence[str]) -> None:
        """Stage exactly the given paths, one ``git add`` per path.

        Each path is passed as a literal argument after ``--`` so that it is
        never interpreted as an option or by a shell.
        """
        for path in paths:
            self._run_attached(["add", "--", path])

    def commit(self, message_file: Path, flags: Sequence[str] = ()) -> None:
        """Create a commit whose message is read from ``message_file``.

        Raises
        ------
        GitError
            If ``git commit`` exits with a non-zero status.
        """
        self._run_attached(["commit", "-F", str(message_file)] + list(flags))
