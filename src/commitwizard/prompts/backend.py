"""
Terminal prompt backend.

:class:`QuestionaryBackend` implements the five primitive question kinds
used by the wizard on top of ``questionary``; the external editor is
opened through :func:`click.edit`. Prompts are asked with ``unsafe_ask`` so
that Ctrl-C raises :class:`KeyboardInterrupt` and ends the process instead
of being turned into a ``None`` answer.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import click
import questionary


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class QuestionaryBackend:
    """Interactive prompts rendered by questionary."""

    def select(self, message: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        return questionary.select(message, choices=list(choices), default=default).unsafe_ask()

    def text(
        self,
        message: str,
        default: str = "",
        validate: Optional[Callable[[str], Union[bool, str]]] = None,
    ) -> str:
        if validate is None:
            return questionary.text(message, default=default).unsafe_ask()
        return questionary.text(message, default=default, validate=validate).unsafe_ask()

    def confirm(self, message: str, default: bool = False) -> bool:
        return bool(questionary.confirm(message, default=default).unsafe_ask())

    def checkbox(self, message: str, choices: Sequence[Tuple[str, Any]]) -> List[Any]:
        """Multi-select over ``(label, value)`` pairs, all initially unchecked."""
        items = [questionary.Choice(title=label, value=value, checked=False) for label, value in choices]
        selected = questionary.checkbox(message, choices=items).unsafe_ask()
        return list(selected or [])

    def editor(self, message: str) -> str:
        """Open ``$EDITOR`` and return the saved text, or ``""`` if unsaved."""
        click.echo(message)
        logger.debug("Opening external editor for multi-line input")
        edited = click.edit("", require_save=True)
        return edited or ""
