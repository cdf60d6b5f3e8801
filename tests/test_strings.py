"""Test string literal lexing."""

from tagscript.tokens import TokenType

from .conftest import assert_types, assert_values


class TestStringLiterals:
    def test_double_quoted(self, lex):
        tokens = lex('"hello"')
        assert_types(tokens, [TokenType.StringLiteral])
        assert_values(tokens, ["hello"])

    def test_single_quoted(self, lex):
        tokens = lex("'hello'")
        assert_types(tokens, [TokenType.StringLiteral])
        assert_values(tokens, ["hello"])

    def test_empty(self, lex):
        tokens = lex('""')
        assert_types(tokens, [TokenType.StringLiteral])
        assert_values(tokens, [""])

    def test_whitespace_preserved(self, lex):
        assert_values(lex('"  a  b  "'), ["  a  b  "])

    def test_other_quote_inside(self, lex):
        assert_values(lex("\"it's\""), ["it's"])
        assert_values(lex("'say \"hi\"'"), ['say "hi"'])

    def test_no_escape_processing(self, lex):
        tokens = lex('"a\\"b"')
        # Ends at the first embedded quote; the backslash is kept verbatim
        assert tokens[0].type == TokenType.StringLiteral
        assert tokens[0].value == "a\\"
        assert_types(tokens, [TokenType.StringLiteral, TokenType.Identifier, TokenType.StringLiteral])

    def test_special_characters_kept(self, lex):
        assert_values(lex('"<a /> // not a comment"'), ["<a /> // not a comment"])

    def test_multiline(self, lex):
        assert_values(lex('"line1\nline2"'), ["line1\nline2"])

    def test_attribute_string(self, lex):
        tokens = lex('type="string"')
        assert_types(tokens, [TokenType.Type, TokenType.Equals, TokenType.StringLiteral])


class TestUnterminated:
    def test_absorbs_rest_of_input(self, lex):
        tokens = lex('"abc <def> ghi')
        assert_types(tokens, [TokenType.StringLiteral])
        assert_values(tokens, ["abc <def> ghi"])

    def test_lone_quote(self, lex):
        tokens = lex("'")
        assert_types(tokens, [TokenType.StringLiteral])
        assert_values(tokens, [""])

    def test_tokens_before_unterminated(self, lex):
        tokens = lex('<print> "oops')
        assert_types(
            tokens,
            [
                TokenType.OpenBracket,
                TokenType.Identifier,
                TokenType.CloseBracket,
                TokenType.StringLiteral,
            ],
        )
