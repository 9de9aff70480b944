"""A small Pokémon store on top of a DB-API database connection."""

from __future__ import annotations

import contextlib
import logging
import os
import re
import sqlite3
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ADD_POKEMON_STATEMENT = "add_pokemon"
POKEMON_TABLE = "pokemons"

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")


@dataclass(frozen=True)
class _Dialect:
    placeholder: str
    serial_key: str
    exists_query: str


_SQLITE = _Dialect(
    placeholder="?",
    serial_key="INTEGER PRIMARY KEY AUTOINCREMENT",
    exists_query="SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
)
_POSTGRES = _Dialect(
    placeholder="%s",
    serial_key="SERIAL PRIMARY KEY",
    exists_query="SELECT to_regclass(%s)",
)


class PokeBase:
    """Creates tables and stores Pokémon through a database connection.

    ``connection`` is either an open DB-API connection or the path of an
    SQLite database file to open.
    """

    def __init__(self, connection, name: str = "default", type: str = "normal",
                 level: int = 1) -> None:
        if isinstance(connection, (str, os.PathLike)):
            try:
                connection = sqlite3.connect(connection)
            except sqlite3.Error as error:
                raise RuntimeError("Failed to connect to the database") from error
        self.connection = connection
        self.name = name
        self.type = type
        self.level = level
        self._dialect = _SQLITE if isinstance(connection, sqlite3.Connection) else _POSTGRES
        self._statements: dict[str, str] = {}
        logger.info("Connected successfully to Database")

    def __enter__(self) -> PokeBase:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _run(self, query: str, params: tuple = ()) -> list:
        cursor = self.connection.cursor()
        try:
            cursor.execute(query, params)
            rows = cursor.fetchall() if cursor.description else []
            self.connection.commit()
            return rows
        except Exception:
            with contextlib.suppress(Exception):
                self.connection.rollback()
            raise
        finally:
            with contextlib.suppress(Exception):
                cursor.close()

    def execute_query(self, query: str) -> bool:
        """Run ``query`` in its own transaction; return whether it succeeded."""
        try:
            self._run(query)
        except Exception as error:
            logger.error("Fetching query failed: %s", error)
            return False
        logger.info("Query executed successfully")
        return True

    def init_base(self) -> bool:
        """Create the application database."""
        return self.execute_query("CREATE DATABASE pokeapi OWNER golo;")

    def init_table(self, table_name: str) -> bool:
        """Create a Pokémon table called ``table_name`` unless it exists."""
        if not _IDENTIFIER.match(table_name):
            raise ValueError(f"Invalid table name: {table_name!r}")
        query = (
            f"CREATE TABLE IF NOT EXISTS {table_name}("
            f"id {self._dialect.serial_key}, "
            "name VARCHAR(60) NOT NULL, "
            "type VARCHAR(30) NOT NULL, "
            "level INTEGER NOT NULL DEFAULT 1"
            ");"
        )
        return self.execute_query(query)

    def prepare_statement(self) -> str:
        """Register the insert statement and return its name."""
        mark = self._dialect.placeholder
        self._statements[ADD_POKEMON_STATEMENT] = (
            f"INSERT INTO {POKEMON_TABLE} (name, type, level) VALUES({mark}, {mark}, {mark})"
        )
        return ADD_POKEMON_STATEMENT

    def add_pokemon(self, statement: str, name: str, type: str, level: int) -> bool:
        """Insert one Pokémon with a prepared statement; return whether it succeeded."""
        try:
            query = self._statements[statement]
        except KeyError:
            logger.error("Error: unknown prepared statement %r", statement)
            return False
        try:
            self._run(query, (name, type, level))
        except Exception as error:
            logger.error("Error: %s", error)
            return False
        logger.info("Adding pokemons successfully")
        return True

    def table_exists(self, table_name: str) -> bool:
        """Return whether a table called ``table_name`` exists."""
        try:
            rows = self._run(self._dialect.exists_query, (table_name,))
        except Exception as error:
            logger.error("Table existence check failed %s", error)
            return False
        return bool(rows) and rows[0][0] is not None

    def close(self) -> None:
        """Close the underlying connection."""
        logger.info("Closing connection. Ending session")
        self.connection.close()