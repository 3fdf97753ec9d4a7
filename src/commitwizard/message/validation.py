"""Validators for the free text answers of the commit wizard.

Validators follow the prompt contract: they return ``True`` when the value
is acceptable, otherwise an error message. Style checks are also exposed
separately so that they can be reported as warnings instead of blocking
the answer.
"""

from __future__ import annotations

from typing import Callable, List, Union


ValidationResult = Union[bool, str]
Validator = Callable[[str], ValidationResult]


def require_text(error_message: str) -> Validator:
    """Build a validator rejecting empty or whitespace-only input."""

    def validate(value: str) -> ValidationResult:
        if not value or not value.strip():
            return error_message
        return True

    return validate


def description_style_issues(value: str, max_length: int = 72) -> List[str]:
    """Return style problems for a header description (may be empty)."""
    issues = []
    if len(value) > max_length:
        issues.append(f"Recommended to stay within {max_length} characters ({len(value)} used).")
    if value.rstrip().endswith("."):
        issues.append("Please omit trailing period.")
    return issues


def description_validator(max_length: int = 72, strict: bool = False) -> Validator:
    """Build the validator for the description prompt.

    Emptiness is always rejected. In strict mode the style checks reject
    the answer too; otherwise they are left to :func:`description_style_issues`.
    """
    required = require_text("Description is required.")

    def validate(value: str) -> ValidationResult:
        result = required(value)
        if result is not True:
            return result
        if strict:
            issues = description_style_issues(value.strip(), max_length)
            if issues:
                return issues[0]
        return True

    return validate
