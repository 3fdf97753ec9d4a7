"""
Collection of commit fields through the interactive question flow.

:func:`commit_questions` lists the wizard questions in the order they are
asked and :func:`collect_commit_fields` turns the answers into a
:class:`CommitFields` record.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from commitwizard.prompts.questions import CONFIRM, EDITOR, SELECT, TEXT, Answers, Question, ask_questions

from .composer import normalize_issue_refs, parse_comma_list
from .model import COMMIT_TYPES, CommitFields
from .validation import description_style_issues, description_validator, require_text


def commit_questions(config: Optional[Dict[str, Any]] = None) -> List[Question]:
    """Return the commit message questions.

    ``config`` supplies ``strict`` and ``max_description_length``; see
    :mod:`commitwizard.config.loader`.
    """
    config = config or {}
    strict = bool(config.get("strict", False))
    max_length = int(config.get("max_description_length", 72))

    def advise_description(value: str) -> List[str]:
        return [] if strict else description_style_issues(value.strip(), max_length)

    return [
        Question("type", SELECT, "Select commit type", choices=COMMIT_TYPES),
        Question("scope", TEXT, "Optional scope (leave empty for none)"),
        Question(
            "description",
            TEXT,
            "Short description",
            validate=description_validator(max_length, strict),
            advise=advise_description,
        ),
        Question("breaking", CONFIRM, "Is this a breaking change?", default=False),
        Question(
            "breaking_details",
            TEXT,
            "Describe the breaking change",
            when=lambda answers: bool(answers.get("breaking")),
            validate=require_text("Details are required for breaking changes."),
        ),
        Question("wants_body", CONFIRM, "Add a detailed body? (opens editor)", default=False),
        Question(
            "body",
            EDITOR,
            "Body (save & close to keep, empty to skip)",
            when=lambda answers: bool(answers.get("wants_body")),
        ),
        Question("refs", TEXT, "Optional issue refs (comma-separated, e.g. #123, #456)"),
        Question("closes", TEXT, "Optional closes (comma-separated, e.g. #123)"),
        Question("amend", CONFIRM, "Use --amend?", default=False),
        Question("signoff", CONFIRM, "Use --signoff?", default=False),
        Question("no_verify", CONFIRM, "Use --no-verify?", default=False),
        Question("confirm_commit", CONFIRM, "Run git commit now?", default=True),
    ]


def fields_from_answers(answers: Answers) -> CommitFields:
    """Build :class:`CommitFields` from raw answers."""
    breaking_details = ""
    if answers.get("breaking"):
        breaking_details = (answers.get("breaking_details") or "").strip()

    return CommitFields(
        type=answers["type"],
        scope=(answers.get("scope") or "").strip(),
        description=(answers.get("description") or "").strip(),
        breaking_details=breaking_details,
        body=(answers.get("body") or "").strip(),
        refs=tuple(parse_comma_list(answers.get("refs"))),
        closes=tuple(normalize_issue_refs(parse_comma_list(answers.get("closes")))),
        amend=bool(answers.get("amend")),
        signoff=bool(answers.get("signoff")),
        no_verify=bool(answers.get("no_verify")),
        confirm_commit=bool(answers.get("confirm_commit")),
    )


def collect_commit_fields(
    backend: Any,
    config: Optional[Dict[str, Any]] = None,
    on_warning: Optional[Callable[[str], None]] = None,
) -> CommitFields:
    """Ask the commit questions through ``backend`` and return the fields."""
    answers = ask_questions(commit_questions(config), backend, on_warning=on_warning)
    return fields_from_answers(answers)
