import asyncio
import logging
from pathlib import Path
from typing import Any, Callable, Type, TypeVar, Union

import duckdb

from ...shared.exceptions import DatabaseException
from ...shared.schema import TableSchema

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DuckDBRepository:
    """Shared plumbing for the DuckDB repositories.

    Every operation opens its own short-lived connection and runs in a worker
    thread, so concurrent requests never share a connection object.
    """

    schema: Type[TableSchema] = TableSchema

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = str(db_path)
        self._initialize_database()

    def _connect(self) -> duckdb.DuckDBPyConnection:
        return duckdb.connect(self.db_path)

    def _initialize_database(self):
        """Create the sequence and table if they don't exist."""
        try:
            with self._connect() as conn:
                conn.execute(self.schema.get_sql_create_sequence())
                conn.execute(self.schema.get_sql_create_table())
        except duckdb.Error as e:
            logger.error(f"Failed to initialize table {self.schema.table_name}: {e}")
            raise DatabaseException(
                message="Failed to initialize storage",
                operation=f"init:{self.schema.table_name}",
                cause=e
            )

    async def _run(self, operation: str, message: str, func: Callable[[duckdb.DuckDBPyConnection], T]) -> T:
        """Run `func` with a fresh connection in a worker thread.

        duckdb errors are logged with their cause and re-raised as a
        DatabaseException carrying only the generic `message`.
        """
        def _sync() -> T:
            with self._connect() as conn:
                return func(conn)

        try:
            return await asyncio.to_thread(_sync)
        except duckdb.Error as e:
            logger.error(f"{operation} failed on {self.schema.table_name}: {e}")
            raise DatabaseException(message=message, operation=operation, cause=e)

    def _row_to_dict(self, row: Any) -> dict:
        return dict(zip(self.schema.get_column_names(), row))
