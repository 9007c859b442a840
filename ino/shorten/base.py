"""Abstract database access types used by the shorten helpers."""

from __future__ import annotations

import contextlib
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Iterator, Optional, Sequence


class IsolationLevel(IntEnum):
    """Transaction isolation levels."""

    DEFAULT = 0
    READ_UNCOMMITTED = 1
    READ_COMMITTED = 2
    WRITE_COMMITTED = 3
    REPEATABLE_READ = 4
    SNAPSHOT = 5
    SERIALIZABLE = 6
    LINEARIZABLE = 7

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Rows(ABC):
    """A forward-only result set.

    Iterating yields the values of each remaining row as a tuple; used as a
    context manager the result set is closed on exit.
    """

    @abstractmethod
    def columns(self) -> list[str]:
        """Return the column names of the result set."""

    @abstractmethod
    def next(self) -> bool:
        """Advance to the next row; return False when there is none."""

    @abstractmethod
    def scan(self) -> Sequence[Any]:
        """Return the values of the current row."""

    @abstractmethod
    def close(self) -> None:
        """Release the result set."""

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        while self.next():
            yield tuple(self.scan())

    def __enter__(self) -> "Rows":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is None:
            self.close()
        else:
            with contextlib.suppress(Exception):
                self.close()


class Stmt(ABC):
    """A prepared statement."""

    @abstractmethod
    def execute(self, *args: Any) -> int:
        """Run the statement and return the number of affected rows."""

    @abstractmethod
    def query(self, *args: Any) -> Rows:
        """Run the statement and return its result set."""

    @abstractmethod
    def close(self) -> None:
        """Release the statement."""


class Executor(ABC):
    """A connection or transaction that can run statements.

    Used as a context manager it is released on exit. A failure to release
    never hides an exception already in flight.
    """

    @abstractmethod
    def prepare(self, query: str) -> Stmt:
        """Prepare ``query`` for repeated execution."""

    @abstractmethod
    def execute(self, query: str, *args: Any) -> int:
        """Run ``query`` and return the number of affected rows."""

    @abstractmethod
    def query(self, query: str, *args: Any) -> Rows:
        """Run ``query`` and return its result set."""

    @abstractmethod
    def release(self) -> None:
        """Give the underlying resource back."""

    def __enter__(self) -> "Executor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is None:
            self.release()
        else:
            with contextlib.suppress(Exception):
                self.release()


class Tx(Executor):
    """An executor bound to a transaction that can be committed or rolled back."""

    @abstractmethod
    def commit(self) -> None:
        """Commit the transaction."""

    @abstractmethod
    def rollback(self) -> None:
        """Roll the transaction back."""


class Factory(ABC):
    """Hands out connections and transactions."""

    @abstractmethod
    def get_connection(self) -> Executor:
        """Return a connection for work outside a transaction scope."""

    @abstractmethod
    def get_transaction(self, level: Optional[IsolationLevel]) -> Tx:
        """Begin and return a transaction with the given isolation level."""