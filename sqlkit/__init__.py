"""Tokenize SQL statements and quote values safely for embedding in them."""

from sqlkit.lexer import (
    escape_identifier,
    escape_literal,
    is_quoted,
    is_unterminated,
    qualified_table,
    quote_ident,
    quote_literal,
    tokenize,
    unescape,
)

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
