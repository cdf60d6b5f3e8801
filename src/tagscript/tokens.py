"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Literals and names
    Number = auto()
    Name = auto()  # keyword `name`
    StringLiteral = auto()  # "..." or '...', value excludes the quotes
    Identifier = auto()

    # Punctuation
    OpenParen = auto()  # (
    CloseParen = auto()  # )
    BinaryOperator = auto()  # + - * /
    OpenBracket = auto()  # <
    CloseBracket = auto()  # >
    EndBracket = auto()  # </
    Equals = auto()  # =

    # Keywords
    Let = auto()
    Const = auto()
    Args = auto()
    Arg = auto()
    Return = auto()
    Counter = auto()
    Type = auto()

    SelfClosingTag = auto()  # />

    While = auto()
    For = auto()
    If = auto()
    ElseIf = auto()
    Else = auto()
    From = auto()
    To = auto()
    Condition = auto()

    OpenBrace = auto()  # {
    CloseBrace = auto()  # }

    # Reserved for the parser, never produced by the lexer
    Comment = auto()
    StartTemplateString = auto()
    EndTemplateString = auto()
    StartInterpolation = auto()
    EndInterpolation = auto()


RESERVED_TYPES = frozenset(
    {
        TokenType.Comment,
        TokenType.StartTemplateString,
        TokenType.EndTemplateString,
        TokenType.StartInterpolation,
        TokenType.EndInterpolation,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: the lexeme and its category."""

    value: str
    type: TokenType


# Reserved words are case-sensitive (`elseIf`, not `elseif`).
SPECIAL_IDENTIFIERS: dict[str, TokenType] = {
    "let": TokenType.Let,
    "const": TokenType.Const,
    "args": TokenType.Args,
    "arg": TokenType.Arg,
    "return": TokenType.Return,
    "counter": TokenType.Counter,
    "name": TokenType.Name,
    "type": TokenType.Type,
    "while": TokenType.While,
    "for": TokenType.For,
    "if": TokenType.If,
    "elseIf": TokenType.ElseIf,
    "else": TokenType.Else,
    "from": TokenType.From,
    "to": TokenType.To,
    "condition": TokenType.Condition,
}


class NoteKind(Enum):
    UNRECOGNIZED = auto()  # character with no token class, dropped
    STRAY_SLASH = auto()  # "/" that is neither "//", "/>" nor an operator
    UNTERMINATED_STRING = auto()  # string literal ran to end of input


@dataclass(frozen=True, slots=True)
class ScanNote:
    """Something the lexer dropped or absorbed without emitting a token for it."""

    kind: NoteKind
    offset: int
    text: str


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


def position_at(source: str, offset: int) -> Position:
    """Return the line/column of a character offset into source."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1, offset)


# Whole-word numeric literals: decimal with optional exponent, or radix-prefixed.
_NUMBER_RE = re.compile(r"[0-9]+(?:[eE]-?[0-9]+)?|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def is_alpha(ch: str) -> bool:
    """Return True if ch can start or continue a word (letters, _ and -)."""
    return ch != "" and (ch.upper() != ch.lower() or ch == "_" or ch == "-")


def is_numeric(ch: str) -> bool:
    """Return True if ch is a decimal digit."""
    return ch != "" and ch in "0123456789"


def is_word_char(ch: str) -> bool:
    return is_alpha(ch) or is_numeric(ch)


def is_number_literal(word: str) -> bool:
    """Return True if the whole word reads as a numeric literal."""
    return _NUMBER_RE.fullmatch(word) is not None
