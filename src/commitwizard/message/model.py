"""
Data model for the answers collected by the commit wizard.

The :class:`CommitFields` record holds every Conventional Commit field
together with the git flags chosen by the user. It is immutable and is
rendered into a message by :func:`commitwizard.message.composer.compose_message`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


COMMIT_TYPES: Tuple[str, ...] = (
    "build",
    "chore",
    "ci",
    "docs",
    "feat",
    "fix",
    "perf",
    "refactor",
    "revert",
    "style",
    "test",
)


@dataclass(frozen=True)
class CommitFields:
    """Structured commit message fields.

    Attributes
    ----------
    type : str
        One of :data:`COMMIT_TYPES`.
    description : str
        Short summary used in the header.
    scope : str
        Optional scope; empty string means no scope.
    breaking_details : str
        Breaking change description; empty when the change is not breaking.
    body : str
        Optional free text body.
    refs : Tuple[str, ...]
        Reference tokens rendered in a single ``Refs:`` footer.
    closes : Tuple[str, ...]
        Issue tokens, each rendered as its own ``Closes`` footer.
    amend, signoff, no_verify : bool
        Extra ``git commit`` flags.
    confirm_commit : bool
        Whether the user asked to run the commit.
    """

    type: str
    description: str
    scope: str = ""
    breaking_details: str = ""
    body: str = ""
    refs: Tuple[str, ...] = ()
    closes: Tuple[str, ...] = ()
    amend: bool = False
    signoff: bool = False
    no_verify: bool = False
    confirm_commit: bool = True

    def __post_init__(self) -> None:
        if self.type not in COMMIT_TYPES:
            raise ValueError(f"Invalid commit type {self.type!r}; expected one of: {', '.join(COMMIT_TYPES)}")
        if not self.description.strip():
            raise ValueError("Commit description must not be empty")

    @property
    def breaking(self) -> bool:
        return bool(self.breaking_details.strip())

    @property
    def flags(self) -> List[str]:
        """Return the ``git commit`` flags in their fixed order."""
        flags = []
        if self.amend:
            flags.append("--amend")
        if self.signoff:
            flags.append("--signoff")
        if self.no_verify:
            flags.append("--no-verify")
        return flags
