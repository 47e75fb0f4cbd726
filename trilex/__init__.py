"""Tokenizer for C source code, with compiler identification from predefined macros."""

__version__ = "0.1.0"
__all__ = ["tokens", "lexer", "cli", "compiler_id", "platform_id"]