"""Quote and unquote SQL string literals and identifiers.

Both kinds use the SQL doubling convention: a quote character inside a
quoted span is written twice.
"""

from sqlkit.constants import IDENTIFIER_QUOTE, LITERAL_QUOTE, QUOTE_CHARS


def escape_literal(raw: str) -> str:
    """Double single quotes. The caller wraps the result in '...'."""
    return raw.replace(LITERAL_QUOTE, LITERAL_QUOTE * 2)


def escape_identifier(raw: str) -> str:
    """Double double quotes. The caller wraps the result in "..."."""
    return raw.replace(IDENTIFIER_QUOTE, IDENTIFIER_QUOTE * 2)


def quote_literal(raw: str) -> str:
    return f"{LITERAL_QUOTE}{escape_literal(raw)}{LITERAL_QUOTE}"


def quote_ident(ident: str) -> str:
    return f"{IDENTIFIER_QUOTE}{escape_identifier(ident)}{IDENTIFIER_QUOTE}"


def qualified_table(schema: str, table: str) -> str:
    return f"{quote_ident(schema)}.{quote_ident(table)}"


def unescape(token: str) -> str:
    """
    Strip the quotes from a quoted token and collapse doubled quotes.

    Tokens that do not start with ' or " (bare words, punctuation) are
    returned unchanged. Scanning stops at the first lone closing quote;
    anything after it is ignored. A missing closing quote is tolerated.

    Example:
        "'it''s'" -> "it's"
    """
    if not token or token[0] not in QUOTE_CHARS:
        return token

    quote_char = token[0]
    chars: list[str] = []
    pos = 1
    length = len(token)
    while pos < length:
        char = token[pos]
        if char == quote_char:
            if pos + 1 < length and token[pos + 1] == quote_char:
                chars.append(char)
                pos += 2
                continue
            break
        chars.append(char)
        pos += 1
    return "".join(chars)
