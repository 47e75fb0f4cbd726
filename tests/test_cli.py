from trilex.cli import format_tokens, main
from trilex.lexer import tokenize
from trilex.tokens import Token, TokenType


def test_format_empty_list_is_header_only():
    assert format_tokens([]) == "Tokens:\n"


def test_format_single_token_layout():
    assert format_tokens([Token(TokenType.PLUS, "+")]) == "Tokens:\n  0 : '+'\n"


def test_format_missing_text_shows_null():
    out = format_tokens([Token(TokenType.IDENTIFIER, None)])
    assert out.splitlines()[1].endswith("'(null)'")


def test_format_uses_numeric_type_right_aligned():
    tok = Token(TokenType.INT, "int")
    line = format_tokens([tok]).splitlines()[1]
    number, _, rest = line.partition(" : ")
    assert int(number) == TokenType.INT.value
    assert len(number) >= 3
    assert rest == "'int'"


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "Usage:" in captured.err
    assert captured.out == ""


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.c"
    assert main([str(missing)]) == 1
    captured = capsys.readouterr()
    assert f"Failed to read file: {missing}" in captured.err


def test_main_prints_tokens(tmp_path, capsys):
    source = "int main() { return x + 1; } // done\n"
    path = tmp_path / "prog.c"
    path.write_text(source, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == format_tokens(tokenize(source))
    lines = out.splitlines()
    assert lines[0] == "Tokens:"
    assert len(lines) - 1 == len(tokenize(source))


def test_main_ignores_extra_arguments(tmp_path, capsys):
    path = tmp_path / "a.c"
    path.write_text("a", encoding="utf-8")
    assert main([str(path), "extra"]) == 0
    assert capsys.readouterr().out == format_tokens(tokenize("a"))