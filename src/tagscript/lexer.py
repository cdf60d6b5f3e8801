"""TagScript lexer — converts source text into a flat token stream."""

from __future__ import annotations

from tagscript.tokens import (
    SPECIAL_IDENTIFIERS,
    NoteKind,
    ScanNote,
    Token,
    TokenType,
    is_alpha,
    is_number_literal,
    is_numeric,
    is_word_char,
)

# Single-character tokens with no lookahead
_SINGLE = {
    ">": TokenType.CloseBracket,
    "(": TokenType.OpenParen,
    ")": TokenType.CloseParen,
    "{": TokenType.OpenBrace,
    "}": TokenType.CloseBrace,
}

_OPERATORS = "+-*/"
_QUOTES = "\"'"


class Lexer:
    """Tokenize TagScript source text into a list of Token objects.

    The lexer never fails. Characters it cannot classify are dropped, and a
    string literal with no closing quote takes the rest of the input. Each
    such event is recorded in ``notes`` for tooling; the token list itself
    carries no trace of it.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []
        self.notes: list[ScanNote] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while self._pos < len(self._source):
            self._skip_whitespace()
            if self._pos >= len(self._source):
                break
            self._lex_next()
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self, count: int = 1) -> str:
        text = self._source[self._pos : self._pos + count]
        self._pos += len(text)
        return text

    def _emit(self, tt: TokenType, value: str) -> Token:
        tok = Token(value, tt)
        self._tokens.append(tok)
        return tok

    def _note(self, kind: NoteKind, offset: int, text: str) -> None:
        self.notes.append(ScanNote(kind, offset, text))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_next(self) -> None:
        ch = self._peek()
        nxt = self._peek(1)

        if ch == "/" and nxt == "/":
            self._skip_comment()
            return

        if ch == "<":
            if nxt == "/":
                self._emit(TokenType.EndBracket, self._advance(2))
            else:
                self._emit(TokenType.OpenBracket, self._advance())
            return

        if ch == "/" and nxt == ">":
            self._emit(TokenType.SelfClosingTag, self._advance(2))
            return

        if ch == "/" and self._is_stray_slash():
            self._note(NoteKind.STRAY_SLASH, self._pos, self._advance())
            return

        if ch in _SINGLE:
            self._emit(_SINGLE[ch], self._advance())
            return

        if ch in _OPERATORS:
            self._emit(TokenType.BinaryOperator, self._advance())
            return

        if ch == "=":
            self._emit(TokenType.Equals, self._advance())
            return

        if ch in _QUOTES:
            self._lex_string()
            return

        if is_numeric(ch) or is_alpha(ch):
            self._lex_word()
            return

        self._note(NoteKind.UNRECOGNIZED, self._pos, self._advance())

    # ------------------------------------------------------------------
    # Skipped input
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._peek().isspace():
            self._pos += 1

    def _skip_comment(self) -> None:
        # The newline is left for _skip_whitespace
        end = self._source.find("\n", self._pos)
        self._pos = len(self._source) if end == -1 else end

    def _is_stray_slash(self) -> bool:
        """A "/" is stray when only whitespace separates it from ">" or EOF."""
        idx = self._pos + 1
        while idx < len(self._source) and self._source[idx].isspace():
            idx += 1
        return idx >= len(self._source) or self._source[idx] == ">"

    # ------------------------------------------------------------------
    # Strings and words
    # ------------------------------------------------------------------

    def _lex_string(self) -> None:
        start = self._pos
        quote = self._advance()
        end = self._source.find(quote, self._pos)
        if end == -1:
            self._note(NoteKind.UNTERMINATED_STRING, start, quote)
            end = len(self._source)
        value = self._advance(end - self._pos)
        self._advance()  # closing quote, if any
        self._emit(TokenType.StringLiteral, value)

    def _lex_word(self) -> None:
        start = self._pos
        while self._pos < len(self._source) and is_word_char(self._peek()):
            self._pos += 1
        word = self._source[start : self._pos]

        if is_number_literal(word):
            self._emit(TokenType.Number, word)
        elif word in SPECIAL_IDENTIFIERS:
            self._emit(SPECIAL_IDENTIFIERS[word], word)
        else:
            self._emit(TokenType.Identifier, word)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).tokenize()
