"""Database helpers for DuckDB interactions."""

from .duckdb_io import (
    column_type_for,
    connect_db,
    result_get_value,
    result_get_value_as_integer,
    sql_command,
    sql_get_integer,
    sql_query,
)
from .errors import SQLError

__all__ = [
    "SQLError",
    "column_type_for",
    "connect_db",
    "result_get_value",
    "result_get_value_as_integer",
    "sql_command",
    "sql_get_integer",
    "sql_query",
]
