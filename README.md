# trilex

`trilex` splits C source code into tokens, such as keywords, identifiers,
numbers, string literals, operators and punctuation. It skips whitespace,
`//` comments and `/* ... */` comments.

It also has helpers that take a set of predefined preprocessor macros and work
out which C compiler, target platform and architecture they describe.

## Command line

```
trilex path/to/file.c
```

The command prints every token on its own line. Each line shows the token's
numeric type and its text:

```
Tokens:
 47 : 'int'
 75 : 'main'
 33 : '('
 ...
```

The numbers are the values of `trilex.tokens.TokenType`. For example,
`TokenType.INT` is 47, `TokenType.IDENTIFIER` is 75 and `TokenType.LPAREN`
is 33.

If no file is given, the command prints a usage message to standard error and
exits with status 1. It does the same with a message if the file cannot be read.

## Library

```python
from trilex.lexer import Lexer, read_file, tokenize
from trilex.tokens import Token, TokenType, check_keyword

for token in tokenize("int x = 42;"):
    print(token.type.name, token.text)

lexer = Lexer("return a->b;")
print(lexer.peek())   # the next token, not consumed
print(lexer.next())   # the same token, now consumed
for token in lexer:   # the remaining tokens, up to end of input
    print(token)

assert check_keyword("while") is TokenType.WHILE
assert check_keyword("main") is TokenType.IDENTIFIER
```

- `Token` is a frozen dataclass that holds `type` and `text`. At end of input,
  `Lexer.next()` and `Lexer.lex_token()` return `Token(TokenType.EOF, None)`.
  Iterating a `Lexer` and calling `tokenize` both stop before that token.
- `read_file(filename)` returns a file's contents as text. It raises `OSError`
  if the file cannot be read.
- `trilex.cli.format_tokens(tokens)` returns the same listing the command
  prints.

The following details of the lexer are worth knowing:

- A NUL character in the source ends the input.
- Every number is an `INT_LITERAL`, including ones with a decimal point such as
  `3.14`.
- A string literal runs to the next `"` that is not preceded by a backslash. If
  no such `"` comes, it runs to the end of input. The quotes are kept in the
  token text.
- Only these keywords are recognised: `void volatile char const continue case
  short signed static struct switch sizeof int long float for double do
  default else enum extern return while unsigned union typedef goto`. Other
  words, including `if` and `break`, come back as `IDENTIFIER`.
- Two-character operators are `++ -- += -= *= /= %= == != <= >= && || << >> ## ->`.
  Any character the lexer does not know becomes an `UNKNOWN` token.

## Compiler identification

The helpers take a mapping of defined macros, such as
`{"__GNUC__": 13, "__linux__": None}`. Each value may be an integer, a numeric
string, or `None` for a macro defined without a value.

```python
from trilex.compiler_id import identify_compiler
from trilex.platform_id import build_report

macros = {
    "__GNUC__": 13, "__GNUC_MINOR__": 3, "__GNUC_PATCHLEVEL__": 0,
    "__linux__": None, "__STDC__": 1, "__STDC_VERSION__": 201710,
}

info = identify_compiler(macros)
info.compiler_id          # "GNU"
info.version_string()     # "00000013.00000003.00000000"

build_report(macros).info_strings()
# ["INFO:compiler[GNU]",
#  "INFO:compiler_version[00000013.00000003.00000000]",
#  "INFO:platform[Linux]",
#  "INFO:arch[]",
#  "INFO:standard_default[17]",
#  "INFO:extensions_default[ON]"]
```

- `trilex.compiler_id` provides `identify_compiler`, which returns a
  `CompilerInfo`. Each version component of a `CompilerInfo` is an
  eight-character string made by `encode_dec` or `encode_hex`. Use
  `version_string()` and `simulate_version_string()` to get the dotted forms.
- `trilex.platform_id` provides `identify_platform`, `identify_architecture`,
  `language_standard_default`, `language_extensions_default` and
  `build_report`. `build_report` returns a `CompilerReport`.

## What it does not do

`trilex` only produces tokens. It has no parser, no syntax tree and no code
generation. It does not run the preprocessor. It does not recognise character
literals or floating-point literals as separate kinds. The compiler
identification helpers do not read macros from a real compiler; you have to
supply the mapping yourself.

## Tests

```
pip install -e .[test]
pytest
```