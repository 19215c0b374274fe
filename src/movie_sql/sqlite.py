from collections import namedtuple
from functools import cached_property
from pathlib import Path
import os
import shutil
import sqlite3

from .errors import NoRowsError, StatementError
from .queries import index_list, table_info
from .logger import log


ColumnInfo = namedtuple("ColumnInfo", ["name", "type", "not_null", "primary_key"])
IndexInfo = namedtuple("IndexInfo", ["name", "unique"])


class Database:
    """Thin wrapper over a SQLite file used by the loader and the exercises.

    Every statement runs in its own transaction, so a failed insert leaves
    earlier inserts committed.
    """

    @classmethod
    def from_env(cls, db_path="movies.db"):
        return cls(os.getenv("MOVIE_SQL_DB", db_path))

    @classmethod
    def from_existing(cls, source, target, directory=None):
        """Open stage ``target`` as a copy of stage ``source``.

        Stages are ``<directory>/<name>.db`` files, so each exercise step
        starts from the database the previous step left behind.
        """
        directory = Path(directory or os.getenv("MOVIE_SQL_STAGES", "db"))
        source_path = directory / f"{source}.db"
        target_path = directory / f"{target}.db"
        if not source_path.exists():
            raise FileNotFoundError(f"stage database not found: {source_path}")

        if target_path.exists():
            os.remove(target_path)
        shutil.copyfile(source_path, target_path)
        log.info("stage_copied", source=str(source_path), target=str(target_path))
        return cls(target_path)

    def __init__(self, db_path):
        self.db_path = str(db_path)

    @cached_property
    def connection(self):
        connection = sqlite3.connect(self.db_path)
        connection.row_factory = sqlite3.Row
        return connection

    def close(self):
        if "connection" in self.__dict__:
            self.connection.close()
            del self.__dict__["connection"]

    # ---- Statements ----
    def execute(self, sql, params=()):
        try:
            with self.connection:
                self.connection.execute(sql, params)
        except sqlite3.Error as e:
            raise StatementError(str(e), sql=sql) from e

    def insert_many(self, sql, rows):
        rows = list(rows)
        if not rows:
            return 0
        try:
            with self.connection:
                self.connection.executemany(sql, rows)
        except sqlite3.Error as e:
            raise StatementError(str(e), sql=sql) from e
        return len(rows)

    def create_table(self, sql):
        self.execute(sql)

    def create_index(self, sql):
        self.execute(sql)

    def insert(self, sql, params=()):
        self.execute(sql, params)

    # ---- Queries ----
    def _fetch(self, sql, params):
        try:
            return self.connection.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StatementError(str(e), sql=sql) from e

    def select_single_row(self, sql, params=()) -> dict:
        rows = self._fetch(sql, params)
        if not rows:
            raise NoRowsError(sql)
        return dict(rows[0])

    def select_multiple_rows(self, sql, params=()) -> list:
        return [dict(row) for row in self._fetch(sql, params)]

    # ---- Introspection ----
    def table_exists(self, table) -> bool:
        rows = self._fetch(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?", (table,)
        )
        return bool(rows)

    def columns(self, table):
        return [
            ColumnInfo(
                row["name"], row["type"].lower(), row["notnull"] == 1, row["pk"] > 0
            )
            for row in self._fetch(table_info(table), ())
        ]

    def indexes(self, table):
        return [
            IndexInfo(row["name"], row["unique"] == 1)
            for row in self._fetch(index_list(table), ())
        ]
