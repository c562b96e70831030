"""Tokenize a SQL statement and optionally run it against a DuckDB database."""

from __future__ import annotations

import argparse
import sys

from sqlkit.db import SQLError, connect_db, sql_query
from sqlkit.lexer import is_unterminated, tokenize, unescape
from sqlkit.logger import log_info, log_warn


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tokenize a SQL statement and optionally run it against DuckDB."
    )
    parser.add_argument(
        "statement",
        nargs="?",
        help="Statement to tokenize. Read from stdin when omitted.",
    )
    parser.add_argument(
        "--unescape",
        action="store_true",
        help="Print quoted tokens with their quotes removed and escapes collapsed",
    )
    parser.add_argument(
        "--db",
        default=":memory:",
        help="Path to DuckDB database file. Default: in-memory database",
    )
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Run the statement against --db and print the result table",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    statement = args.statement if args.statement is not None else sys.stdin.read()
    statement = statement.strip()
    if not statement:
        raise SystemExit("No statement given")

    tokens = tokenize(statement)
    for token in tokens:
        if is_unterminated(token):
            log_warn(f"Unterminated quoted token: {token}")
        print(unescape(token) if args.unescape else token)

    if not args.execute:
        return

    log_info(f"Running statement against {args.db}")
    con = connect_db(args.db)
    try:
        result = sql_query(con, statement)
    except SQLError as exc:
        raise SystemExit(str(exc)) from exc
    finally:
        con.close()

    print()
    print(result)


if __name__ == "__main__":
    main()
