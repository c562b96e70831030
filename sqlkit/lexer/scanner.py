"""Split a SQL-like statement into word, punctuation and quoted tokens.

The scanner understands just enough SQL to keep quoted spans intact:

- a single space separates tokens; runs of spaces never yield empty tokens
- ``(``, ``)`` and ``,`` are always tokens of their own
- ``'...'`` and ``"..."`` spans are kept whole, with ``''`` / ``""`` escapes
  left verbatim (see ``sqlkit.lexer.escape.unescape`` to collapse them)

Unterminated quoted spans are not an error: whatever was collected is
returned as the last token. Use ``is_unterminated`` to detect that case.
"""

from sqlkit.constants import PUNCTUATION, QUOTE_CHARS, TOKEN_SEPARATOR


def tokenize(statement: str) -> list[str]:
    """
    Scan a statement into an ordered list of tokens.

    Example:
        "f(a, 'it''s')" -> ["f", "(", "a", ",", "'it''s'", ")"]
    """
    tokens: list[str] = []
    current: list[str] = []
    quote_char = ""
    in_quote = False
    in_gap = True

    pos = 0
    length = len(statement)
    while pos < length:
        char = statement[pos]

        if char == TOKEN_SEPARATOR and not in_quote:
            if not in_gap:
                tokens.append("".join(current))
                current = []
            in_gap = True

        elif char in PUNCTUATION and not in_quote:
            if not in_gap:
                tokens.append("".join(current))
                current = []
            tokens.append(char)
            in_gap = True

        elif char in QUOTE_CHARS:
            if in_quote and char == quote_char:
                if pos + 1 < length and statement[pos + 1] == quote_char:
                    # Doubled quote is an escape, not the end of the span.
                    current.append(char)
                    current.append(char)
                    pos += 2
                    continue
                current.append(char)
                tokens.append("".join(current))
                current = []
                in_gap = True
                in_quote = False
                quote_char = ""
            elif in_quote:
                current.append(char)
            else:
                # Opening quote starts a fresh token; preceding word chars are dropped.
                quote_char = char
                current = [char]
                in_quote = True
                in_gap = False

        else:
            current.append(char)
            in_gap = False

        pos += 1

    if current:
        tokens.append("".join(current))
    return tokens


def is_quoted(token: str) -> bool:
    """Check if token starts with a quote character."""
    return token[:1] in QUOTE_CHARS


def is_unterminated(token: str) -> bool:
    """
    Check if a quoted token is missing its closing quote.

    Doubled quotes count as escapes, so "'a''" is unterminated while
    "'a'''" is not. Non-quoted tokens are never unterminated.
    """
    if not is_quoted(token):
        return False

    quote_char = token[0]
    pos = 1
    while pos < len(token):
        if token[pos] == quote_char:
            if pos + 1 < len(token) and token[pos + 1] == quote_char:
                pos += 2
                continue
            return False
        pos += 1
    return True
