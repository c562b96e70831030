"""Errors raised at the DuckDB boundary."""


class SQLError(Exception):
    """A statement failed in the engine (or produced no usable result)."""

    def __init__(self, operation: str, sql: str, reason: str):
        self.operation = operation
        self.sql = sql
        self.reason = reason
        super().__init__(f"{operation}({sql}) failed: {reason}")
