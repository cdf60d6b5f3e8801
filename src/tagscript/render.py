"""Token stream renderers — plain text listing and JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable

from tagscript.tokens import Token

FORMATS = ("text", "json")


def render(tokens: Iterable[Token], fmt: str = "text") -> str:
    """Render tokens in the named output format."""
    if fmt == "text":
        return render_text(tokens)
    if fmt == "json":
        return render_json(tokens)
    raise ValueError(f"unknown output format {fmt!r} (expected one of: {', '.join(FORMATS)})")


def render_text(tokens: Iterable[Token]) -> str:
    """One line per token: type name, a tab, then the quoted lexeme."""
    return "".join(f"{tok.type.name}\t{tok.value!r}\n" for tok in tokens)


def render_json(tokens: Iterable[Token]) -> str:
    payload = [{"value": tok.value, "type": tok.type.name} for tok in tokens]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
