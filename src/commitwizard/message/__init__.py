"""
Conventional Commit message handling.

This package provides the :class:`CommitFields` model, the pure
:func:`compose_message` renderer, answer validators and the question flow
that collects the fields from the user.
"""

from .collector import collect_commit_fields, commit_questions  # noqa: F401
from .composer import compose_message, normalize_issue_refs, parse_comma_list  # noqa: F401
from .model import COMMIT_TYPES, CommitFields  # noqa: F401
