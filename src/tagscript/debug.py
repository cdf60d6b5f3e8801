"""--debug scanner note dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from tagscript.tokens import NoteKind, ScanNote, position_at


def describe_note(note: ScanNote) -> str:
    """Return a one-line human-readable message for a scanner note."""
    if note.kind == NoteKind.UNRECOGNIZED:
        return f"unrecognized character {note.text!r} dropped"
    if note.kind == NoteKind.STRAY_SLASH:
        return "stray '/' dropped (did you mean '/>'?)"
    return f"unterminated string literal, opening {note.text} runs to end of input"


def dump_notes(
    notes: Iterable[ScanNote],
    source: str,
    filename: str = "input.tag",
    *,
    file: TextIO = sys.stderr,
) -> None:
    """Print each note as ``filename:line:col: message`` to *file*."""
    for note in notes:
        pos = position_at(source, note.offset)
        file.write(f"{filename}:{pos.line}:{pos.column}: {describe_note(note)}\n")
