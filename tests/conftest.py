import logging
from collections.abc import Iterator

import duckdb
import pytest

from sqlkit.logger import LOG_LEVEL, get_logger, set_log_level


@pytest.fixture
def con() -> Iterator[duckdb.DuckDBPyConnection]:
    connection = duckdb.connect(":memory:")
    yield connection
    connection.close()


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def log_records() -> Iterator[list[logging.LogRecord]]:
    """Collect records from the sqlkit logger at DEBUG level."""
    logger = get_logger()
    previous_level = logger.level
    handler = _ListHandler()
    logger.addHandler(handler)
    set_log_level(LOG_LEVEL.DEBUG)
    yield handler.records
    logger.removeHandler(handler)
    set_log_level(previous_level)
