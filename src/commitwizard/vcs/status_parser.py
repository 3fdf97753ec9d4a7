"""
Parsing of ``git status --porcelain`` output.

Each porcelain line is a two character status code, one separator and a
path. Renames and copies are reported as ``old -> new``. The parser turns
every line into a :class:`StatusEntry` holding a display label and the path
that should be handed to ``git add``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


RENAME_SEPARATOR = "->"
RENAME_CODES = frozenset("RC")

# Escapes produced by git's C-style path quoting.
_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}
_OCTAL_DIGITS = "01234567"


@dataclass(frozen=True)
class StatusEntry:
    """A single selectable change.

    Attributes
    ----------
    label : str
        Status code followed by the path field as git printed it.
    path : str
        Path to stage; the destination for renames.
    """

    label: str
    path: str


def unquote_path(path: str) -> str:
    """Undo git's C-style quoting of a path.

    Git wraps paths containing spaces, quotes, control characters or
    (with ``core.quotePath``) non-ASCII bytes in double quotes and escapes
    them. Paths that are not quoted are returned unchanged.
    """
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    body = path[1:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            digits = body[i + 1:i + 4]
            if len(digits) == 3 and all(d in _OCTAL_DIGITS for d in digits):
                out.append(int(digits, 8) & 0xFF)
                i += 4
                continue
            if nxt in _ESCAPES:
                out.append(_ESCAPES[nxt])
                i += 2
                continue
        out.extend(ch.encode("utf-8"))
        i += 1
    return out.decode("utf-8", errors="replace")


def _closing_quote(text: str) -> Optional[int]:
    """Return the index of the quote closing ``text[0]``, honouring escapes."""
    i = 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == '"':
            return i
        i += 1
    return None


def rename_destination(raw_path: str) -> str:
    """Return the destination of an ``old -> new`` path field.

    A quoted source is skipped as a whole so that an arrow inside the old
    name is not mistaken for the separator.
    """
    rest = raw_path
    if raw_path.startswith('"'):
        end = _closing_quote(raw_path)
        if end is not None:
            rest = raw_path[end + 1:]
    _, separator, destination = rest.partition(RENAME_SEPARATOR)
    if not separator:
        return raw_path
    return destination.strip()


def parse_status_line(line: str) -> StatusEntry:
    """Parse one non-blank porcelain line into a :class:`StatusEntry`.

    Only rename and copy entries (``R``/``C`` in either status column) carry
    an ``old -> new`` path field; other paths are taken as they are.
    """
    status = line[:3]
    raw_path = line[3:].strip()
    if RENAME_CODES.intersection(line[:2]) and RENAME_SEPARATOR in raw_path:
        path = rename_destination(raw_path)
    else:
        path = raw_path
    label = f"{status.strip()} {raw_path}".strip()
    return StatusEntry(label=label, path=unquote_path(path))


def parse_status(lines: Iterable[str]) -> List[StatusEntry]:
    """Convert porcelain status lines into status entries.

    Blank and whitespace-only lines are dropped. No filesystem checks are
    made; the status output is trusted verbatim.
    """
    return [parse_status_line(line) for line in lines if line.strip()]
