"""
Rendering of :class:`CommitFields` into a Conventional Commit message.

A message has up to three sections separated by one blank line:

    type(scope)!: description

    body

    BREAKING CHANGE: details
    Refs: #1, #2
    Closes #3

The header is always present. The body and the footer block only appear
when they have content. Footer order is fixed because tools parse it.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .model import CommitFields


def parse_comma_list(text: Optional[str]) -> List[str]:
    """Split comma separated input into trimmed, non-empty tokens."""
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


def normalize_issue_refs(tokens: Iterable[str]) -> List[str]:
    """Prefix every token that does not already start with ``#``."""
    return [token if token.startswith("#") else f"#{token}" for token in tokens]


def format_header(fields: CommitFields) -> str:
    scope = f"({fields.scope})" if fields.scope else ""
    breaking = "!" if fields.breaking else ""
    return f"{fields.type}{scope}{breaking}: {fields.description}"


def format_footers(fields: CommitFields) -> List[str]:
    """Return the footer lines in their contractual order."""
    footers = []
    if fields.breaking:
        footers.append(f"BREAKING CHANGE: {fields.breaking_details.strip()}")
    if fields.refs:
        footers.append(f"Refs: {', '.join(fields.refs)}")
    for token in normalize_issue_refs(fields.closes):
        footers.append(f"Closes {token}")
    return footers


def compose_message(fields: CommitFields) -> str:
    """Render ``fields`` into the final commit message.

    This is a pure function: the same fields always produce the same
    string.
    """
    sections = [format_header(fields)]

    body = fields.body.strip()
    if body:
        sections.append(body)

    footers = format_footers(fields)
    if footers:
        sections.append("\n".join(footers))

    return "\n\n".join(sections)
