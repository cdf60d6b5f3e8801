"""TagScript lexer: tag-flavored scripting language source to tokens."""

from __future__ import annotations

from tagscript.lexer import Lexer, tokenize
from tagscript.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = ["Lexer", "Token", "TokenType", "tokenize", "__version__"]
