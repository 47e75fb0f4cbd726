"""Command-line entry point: print the tokens of a source file."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .lexer import read_file, tokenize
from .tokens import Token

_PROG = "trilex"


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as a listing headed by 'Tokens:', one per line."""
    lines = ["Tokens:"]
    lines.extend(
        f"{int(token.type):3d} : '{token.text if token.text is not None else '(null)'}'"
        for token in tokens
    )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Lex the file named by the first argument and print its tokens."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"Usage: {_PROG} <source_file>", file=sys.stderr)
        return 1

    filename = args[0]
    try:
        source = read_file(filename)
    except OSError:
        print(f"Failed to read file: {filename}", file=sys.stderr)
        return 1

    sys.stdout.write(format_tokens(tokenize(source)))
    return 0


if __name__ == "__main__":
    sys.exit(main())