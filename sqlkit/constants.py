"""Shared constants for statement tokenizing and the DuckDB boundary."""

from enum import StrEnum

LITERAL_QUOTE = "'"
IDENTIFIER_QUOTE = '"'
QUOTE_CHARS = (LITERAL_QUOTE, IDENTIFIER_QUOTE)

PUNCTUATION = frozenset("(),")
TOKEN_SEPARATOR = " "


class FieldType(StrEnum):
    """In-memory value kinds a caller may need to store in a column."""

    INTEGER = "integer"
    REAL = "real"
    STRING = "string"
    BINARY = "binary"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    LIST = "list"


class ColumnType(StrEnum):
    """DuckDB storage types used for mapped fields."""

    BIGINT = "BIGINT"
    DOUBLE = "DOUBLE"
    VARCHAR = "VARCHAR"
    BLOB = "BLOB"
