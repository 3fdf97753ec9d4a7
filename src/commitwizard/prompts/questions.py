"""
Sequential question driver.

A wizard is described as an ordered list of :class:`Question` objects.
:func:`ask_questions` walks the list once, skipping questions whose
``when`` predicate is false for the answers collected so far, and asks the
rest through a prompt backend. A failing ``validate`` re-asks the same
question; ``advise`` reports non-blocking warnings about an accepted
answer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


SELECT = "select"
TEXT = "text"
CONFIRM = "confirm"
CHECKBOX = "checkbox"
EDITOR = "editor"

KINDS = (SELECT, TEXT, CONFIRM, CHECKBOX, EDITOR)

Answers = Dict[str, Any]


@dataclass(frozen=True)
class Question:
    """Specification of a single prompt.

    Attributes
    ----------
    name : str
        Key of the answer in the returned mapping.
    kind : str
        One of :data:`KINDS`.
    message : str
        Prompt text.
    choices : Sequence
        Choices for ``select`` (values) and ``checkbox`` (``(label, value)``
        pairs).
    default : Any
        Default answer for ``text``, ``confirm`` and ``select``.
    when : callable, optional
        Predicate over the answers so far; the question is skipped when it
        returns False.
    validate : callable, optional
        Returns ``True`` or an error message; errors re-ask the question.
    advise : callable, optional
        Returns a list of warnings about an accepted answer.
    """

    name: str
    kind: str
    message: str
    choices: Sequence[Any] = field(default_factory=tuple)
    default: Any = None
    when: Optional[Callable[[Answers], bool]] = None
    validate: Optional[Callable[[str], Union[bool, str]]] = None
    advise: Optional[Callable[[str], List[str]]] = None

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown question kind: {self.kind!r}")


def _prompt(backend: Any, question: Question) -> Any:
    if question.kind == SELECT:
        return backend.select(question.message, question.choices, default=question.default)
    if question.kind == TEXT:
        default = question.default if question.default is not None else ""
        return backend.text(question.message, default=default, validate=question.validate)
    if question.kind == CONFIRM:
        return backend.confirm(question.message, default=bool(question.default))
    if question.kind == CHECKBOX:
        return backend.checkbox(question.message, question.choices)
    return backend.editor(question.message)


def ask_questions(
    questions: Sequence[Question],
    backend: Any,
    on_warning: Optional[Callable[[str], None]] = None,
) -> Answers:
    """Ask ``questions`` in order and return the answers by name.

    Parameters
    ----------
    questions : Sequence[Question]
        Questions in the order they are asked.
    backend : object
        Prompt backend implementing ``select``, ``text``, ``confirm``,
        ``checkbox`` and ``editor``.
    on_warning : callable, optional
        Receives validation errors before a question is re-asked, and
        advisory warnings about accepted answers.
    """
    answers: Answers = {}
    for question in questions:
        if question.when is not None and not question.when(answers):
            logger.debug("Skipping question '%s'", question.name)
            continue

        while True:
            answer = _prompt(backend, question)
            if question.validate is None:
                break
            result = question.validate(answer or "")
            if result is True:
                break
            logger.debug("Answer to '%s' rejected: %s", question.name, result)
            if on_warning is not None:
                on_warning(str(result))

        if question.advise is not None and on_warning is not None:
            for warning in question.advise(answer or ""):
                on_warning(warning)

        answers[question.name] = answer
    return answers
