"""SQL database access for tools and agents."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class Dialect(str, Enum):
    """The SQL dialect a database speaks."""

    MYSQL = "mysql"
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"

    def __str__(self) -> str:
        return self.value


class Engine(ABC):
    """A connection to a database."""

    @abstractmethod
    def dialect(self) -> Dialect:
        """Return the dialect of the database."""

    @abstractmethod
    async def query(self, query: str) -> tuple[list[str], list[list[str]]]:
        """Run the query and return its column names and rows."""

    @abstractmethod
    async def table_names(self) -> list[str]:
        """Return the names of all tables."""

    @abstractmethod
    async def table_info(self, table: str) -> str:
        """Describe a table, typically as a CREATE TABLE statement."""

    @abstractmethod
    def close(self) -> None:
        """Close the database."""


@dataclass
class SQLDatabase:
    """A database with its set of usable tables."""

    engine: Engine
    sample_rows_number: int = 3
    all_tables: frozenset[str] = field(default_factory=frozenset)

    def dialect(self) -> Dialect:
        return self.engine.dialect()

    def table_names(self) -> list[str]:
        """Return the usable table names in sorted order."""
        return sorted(self.all_tables)

    async def table_info(self, tables: Iterable[str] = ()) -> str:
        """Describe the given tables, or all usable tables if none are given.

        Each description is followed by sample rows when
        `sample_rows_number` is positive.
        """
        names = list(dict.fromkeys(tables)) or self.table_names()
        parts: list[str] = []
        for table in names:
            parts.append(await self.engine.table_info(table))
            parts.append("\n\n")
            if self.sample_rows_number > 0:
                parts.append("/*\n")
                parts.append(await self.sample_rows(table))
                parts.append("*/ \n\n")
        return "".join(parts)

    async def query(self, query: str) -> str:
        """Run a query and return its result as tab-separated lines."""
        logger.debug("Query: %s", query)
        columns, rows = await self.engine.query(query)
        lines = ["\t".join(columns), *("\t".join(row) for row in rows)]
        return "".join(line + "\n" for line in lines)

    def close(self) -> None:
        self.engine.close()

    async def sample_rows(self, table: str) -> str:
        """Return the first `sample_rows_number` rows of a table."""
        query = f"SELECT * FROM {table} LIMIT {self.sample_rows_number}"
        logger.debug("Sample Rows Query: %s", query)
        return await self.query(query)


async def build_database(
    engine: Engine,
    sample_rows_number: int = 3,
    ignore_tables: Iterable[str] = (),
) -> SQLDatabase:
    """Create a database over `engine`, leaving out the ignored tables."""
    ignored = set(ignore_tables)
    names = await engine.table_names()
    return SQLDatabase(
        engine=engine,
        sample_rows_number=sample_rows_number,
        all_tables=frozenset(name for name in names if name not in ignored),
    )