import pytest

from trilex.lexer import Lexer, read_file, tokenize
from trilex.tokens import Token, TokenType


def test_simple_declaration():
    tokens = tokenize("int x = 5;")
    assert [t.type for t in tokens] == [
        TokenType.INT,
        TokenType.IDENTIFIER,
        TokenType.ASSIGN,
        TokenType.INT_LITERAL,
        TokenType.SEMICOLON,
    ]
    assert [t.text for t in tokens] == ["int", "x", "=", "5", ";"]


def test_empty_and_blank_input_give_no_tokens():
    assert tokenize("") == []
    assert tokenize(" \t\n\r\v\f ") == []


def test_lex_token_at_end_returns_eof_with_no_text():
    lexer = Lexer("   ")
    assert lexer.lex_token() == Token(TokenType.EOF, None)
    assert lexer.lex_token() == Token(TokenType.EOF, None)


def test_comments_are_skipped():
    source = "a // line comment\n/* block\ncomment */ b"
    assert [t.text for t in tokenize(source)] == ["a", "b"]


def test_unterminated_block_comment_runs_to_end():
    assert [t.text for t in tokenize("a /* never closed b c")] == ["a"]


def test_line_comment_at_end_without_newline():
    assert [t.text for t in tokenize("x // trailing")] == ["x"]


@pytest.mark.parametrize(
    "text, kind",
    [
        ("++", TokenType.INCREMENT),
        ("--", TokenType.DECREMENT),
        ("+=", TokenType.PLUS_ASSIGN),
        ("-=", TokenType.MINUS_ASSIGN),
        ("*=", TokenType.MUL_ASSIGN),
        ("/=", TokenType.DIV_ASSIGN),
        ("%=", TokenType.MOD_ASSIGN),
        ("==", TokenType.EQ),
        ("!=", TokenType.NEQ),
        ("<=", TokenType.LTE),
        (">=", TokenType.GTE),
        ("&&", TokenType.AND),
        ("||", TokenType.OR),
        ("<<", TokenType.LSHIFT),
        (">>", TokenType.RSHIFT),
        ("##", TokenType.HASHHASH),
        ("->", TokenType.ARROW),
    ],
)
def test_two_character_operators(text, kind):
    assert tokenize(text) == [Token(kind, text)]


@pytest.mark.parametrize(
    "text, kind",
    [
        ("+", TokenType.PLUS),
        ("-", TokenType.MINUS),
        ("*", TokenType.STAR),
        ("/", TokenType.SLASH),
        ("%", TokenType.PERCENT),
        ("=", TokenType.ASSIGN),
        ("&", TokenType.AMPERSAND),
        ("|", TokenType.BIT_OR),
        ("^", TokenType.BIT_XOR),
        ("~", TokenType.BIT_NOT),
        ("!", TokenType.NOT),
        ("(", TokenType.LPAREN),
        (")", TokenType.RPAREN),
        ("{", TokenType.LBRACE),
        ("}", TokenType.RBRACE),
        ("[", TokenType.LBRACKET),
        ("]", TokenType.RBRACKET),
        (";", TokenType.SEMICOLON),
        (":", TokenType.COLON),
        (",", TokenType.COMMA),
        (".", TokenType.DOT),
        ("?", TokenType.QUESTION),
        ("#", TokenType.HASH),
    ],
)
def test_single_character_operators(text, kind):
    assert tokenize(text) == [Token(kind, text)]


@pytest.mark.parametrize("text", ["<", ">", "@", "$", "`"])
def test_unmapped_characters_are_unknown(text):
    assert tokenize(text) == [Token(TokenType.UNKNOWN, text)]


def test_numbers_absorb_dots_and_stay_int_literals():
    tokens = tokenize("3.14 1.2.3 42")
    assert all(t.type is TokenType.INT_LITERAL for t in tokens)
    assert [t.text for t in tokens] == ["3.14", "1.2.3", "42"]


def test_identifier_with_digits_and_underscores():
    assert tokenize("_foo_1bar") == [Token(TokenType.IDENTIFIER, "_foo_1bar")]


def test_number_followed_by_identifier_splits():
    assert [t.type for t in tokenize("12ab")] == [TokenType.INT_LITERAL, TokenType.IDENTIFIER]


def test_string_literal_keeps_quotes_and_escaped_quote():
    source = r'"he said \"hi\"" x'
    tokens = tokenize(source)
    assert tokens[0] == Token(TokenType.STRING_LITERAL, r'"he said \"hi\""')
    assert tokens[1] == Token(TokenType.IDENTIFIER, "x")


def test_unterminated_string_runs_to_end():
    source = '"no closing quote here'
    assert tokenize(source) == [Token(TokenType.STRING_LITERAL, source)]


def test_nul_character_ends_input():
    assert [t.text for t in tokenize("a b\0c d")] == ["a", "b"]


def test_peek_does_not_consume():
    lexer = Lexer("foo bar")
    first = lexer.peek()
    assert lexer.peek() == first
    assert lexer.next() == first
    assert lexer.next() == Token(TokenType.IDENTIFIER, "bar")
    assert lexer.next().type is TokenType.EOF


def test_peek_at_end_is_eof():
    lexer = Lexer("x")
    lexer.next()
    assert lexer.peek().type is TokenType.EOF
    assert lexer.next().type is TokenType.EOF


def test_iteration_matches_tokenize_and_excludes_eof():
    source = "while (i <= 10) { i += 2; }"
    tokens = list(Lexer(source))
    assert tokens == tokenize(source)
    assert all(t.type is not TokenType.EOF for t in tokens)
    assert "".join(t.text for t in tokens) == source.replace(" ", "")


def test_iteration_after_peek_includes_peeked_token():
    lexer = Lexer("a b")
    peeked = lexer.peek()
    assert list(lexer)[0] == peeked


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "prog.c"
    content = "int main() { return 0; }\n"
    path.write_text(content, encoding="utf-8")
    assert read_file(path) == content
    assert read_file(str(path)) == content


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.c")