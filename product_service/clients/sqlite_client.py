from contextlib import closing
import sqlite3

WRITE_STATEMENTS = ("INSERT", "UPDATE", "DELETE", "REPLACE")


class SqliteClient:
    """SQLite database client with connection management."""

    def __init__(self, connection_string: str):
        self.connection_string = connection_string
        # The FastAPI lifespan and request tasks may run on different threads
        self._connection = sqlite3.connect(self.connection_string, check_same_thread=False)
        self._connection.row_factory = sqlite3.Row

    def execute_query(self, query: str, params: tuple = ()) -> list[sqlite3.Row]:
        """Execute a statement, committing writes, and return any rows."""
        with closing(self._connection.cursor()) as cursor:
            cursor.execute(query, params)
            if query.lstrip().upper().startswith(WRITE_STATEMENTS):
                self._connection.commit()
            return cursor.fetchall()

    def close(self) -> None:
        self._connection.close()
