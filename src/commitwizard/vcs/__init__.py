"""
Git integration.

This package contains the subprocess-backed :class:`GitClient` and the
parser for ``git status --porcelain`` output used to build the file
picker.
"""

from .git_client import GitClient, GitError, NotARepositoryError  # noqa: F401
from .status_parser import StatusEntry, parse_status  # noqa: F401
