"""Statement tokenizer and quoting helpers."""

from sqlkit.lexer.escape import (
    escape_identifier,
    escape_literal,
    qualified_table,
    quote_ident,
    quote_literal,
    unescape,
)
from sqlkit.lexer.scanner import is_quoted, is_unterminated, tokenize

__all__ = [
    "escape_identifier",
    "escape_literal",
    "is_quoted",
    "is_unterminated",
    "qualified_table",
    "quote_ident",
    "quote_literal",
    "tokenize",
    "unescape",
]
