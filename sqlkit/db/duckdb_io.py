"""DuckDB helpers for running assembled statements and reading results back.

These are thin pass-throughs: statement text is built by the caller (see
``sqlkit.lexer.escape`` for safe quoting) and handed to DuckDB unchanged.
"""

import math
import re
from decimal import Decimal
from pathlib import Path
from typing import Any

import duckdb
import polars as pl

from sqlkit.constants import ColumnType, FieldType
from sqlkit.db.errors import SQLError
from sqlkit.logger import log_debug, log_error

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

_COLUMN_TYPES: dict[FieldType, ColumnType] = {
    FieldType.INTEGER: ColumnType.BIGINT,
    FieldType.REAL: ColumnType.DOUBLE,
    FieldType.STRING: ColumnType.VARCHAR,
    FieldType.BINARY: ColumnType.BLOB,
    FieldType.DATE: ColumnType.VARCHAR,
    FieldType.DATETIME: ColumnType.VARCHAR,
}


def connect_db(path: Path | str | None = None) -> duckdb.DuckDBPyConnection:
    """Connect to DuckDB database file, or an in-memory database if no path."""
    return duckdb.connect(":memory:" if path is None else str(path))


def sql_command(con: duckdb.DuckDBPyConnection, sql: str) -> None:
    """Run a statement and ignore its result (INSERT/UPDATE/CREATE...)."""
    log_debug(f"execute({sql})")
    try:
        con.execute(sql)
    except duckdb.Error as exc:
        log_error(f"execute({sql}) failed: {exc}")
        raise SQLError("execute", sql, str(exc)) from exc


def sql_query(con: duckdb.DuckDBPyConnection, sql: str) -> pl.DataFrame:
    """Run a query and return the whole result table."""
    log_debug(f"query({sql})")
    try:
        return con.execute(sql).pl()
    except duckdb.Error as exc:
        log_error(f"query({sql}) failed: {exc}")
        raise SQLError("query", sql, str(exc)) from exc


def _cell(result: pl.DataFrame, col: int, row: int) -> Any:
    n_rows, n_cols = result.shape
    if not 0 <= col < n_cols:
        raise IndexError(f"Column {col} out of range (result has {n_cols} columns)")
    if not 0 <= row < n_rows:
        raise IndexError(f"Row {row} out of range (result has {n_rows} rows)")
    return result[row, col]


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _as_integer(value: Any) -> int:
    if value is None:
        return 0
    # NaN and infinities have no integer value.
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    if isinstance(value, Decimal) and not value.is_finite():
        return 0
    if isinstance(value, (int, float, Decimal)):
        return int(value)
    match = _LEADING_INT.match(_as_text(value))
    return int(match.group(1)) if match else 0


def result_get_value(result: pl.DataFrame, col: int, row: int) -> str | None:
    """Get a result cell as text. NULL is returned as None, BLOBs are decoded as UTF-8."""
    value = _cell(result, col, row)
    if value is None:
        return None
    return _as_text(value)


def result_get_value_as_integer(result: pl.DataFrame, col: int, row: int) -> int:
    """
    Get a result cell as an integer.

    NULL and text without a leading integer give 0. Text is read like C's
    atoi: "42abc" -> 42, " -7" -> -7, "abc" -> 0.
    """
    return _as_integer(_cell(result, col, row))


def sql_get_integer(con: duckdb.DuckDBPyConnection, sql: str) -> int:
    """Return the first column of the first row of a query as an integer."""
    log_debug(f"get({sql})")
    try:
        row = con.execute(sql).fetchone()
    except duckdb.Error as exc:
        log_error(f"get({sql}) failed: {exc}")
        raise SQLError("get", sql, str(exc)) from exc

    if row is None:
        raise SQLError("get", sql, "no row returned")
    return _as_integer(row[0])


def column_type_for(field_type: FieldType) -> ColumnType | None:
    """Map a field type to the DuckDB column type used to store it."""
    return _COLUMN_TYPES.get(field_type)
