"""Test whitespace and line comment skipping."""

from tagscript.tokens import TokenType

from .conftest import assert_types, assert_values


class TestWhitespace:
    def test_empty_source(self, lex):
        assert lex("") == []

    def test_only_whitespace(self, lex):
        assert lex(" \t\r\n  \n") == []

    def test_surrounding_whitespace_ignored(self, lex):
        assert lex("  let  ") == lex("let")

    def test_unicode_whitespace(self, lex):
        assert_values(lex("a\u00a0b\u2003c"), ["a", "b", "c"])

    def test_crlf(self, lex):
        assert_values(lex("a\r\nb"), ["a", "b"])


class TestComments:
    def test_comment_only(self, lex):
        assert lex("// nothing here") == []

    def test_comment_between_words(self, lex):
        tokens = lex("a // b\nc")
        assert_types(tokens, [TokenType.Identifier, TokenType.Identifier])
        assert_values(tokens, ["a", "c"])

    def test_comment_after_tag(self, lex):
        tokens = lex("</let> // trailing\n<print>")
        assert_values(tokens, ["</", "let", ">", "<", "print", ">"])

    def test_comment_without_trailing_newline(self, lex):
        assert_values(lex("x // to end of input"), ["x"])

    def test_comment_hides_markup(self, lex):
        assert lex('// <let name={x}> "y"') == []

    def test_consecutive_comments(self, lex):
        assert_values(lex("// one\n// two\nz"), ["z"])

    def test_comment_directly_after_token(self, lex):
        assert_values(lex("5// five"), ["5"])
