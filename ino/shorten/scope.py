"""Transaction scopes carried in the current execution context."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ino.shorten.base import Executor, Factory, IsolationLevel, Tx

DEFAULT_LEVEL = IsolationLevel.DEFAULT

_current: ContextVar[Optional["TxScope"]] = ContextVar("ino_shorten_tx", default=None)


@dataclass(eq=False)
class TxScope:
    """Lifecycle of one transaction shared by the code running inside a scope.

    The transaction is begun lazily by :func:`get` and finished by :meth:`end`.
    """

    level: IsolationLevel = IsolationLevel.DEFAULT
    tx: Optional[Tx] = None
    _rollback_only: bool = field(default=False, repr=False)

    def rollback(self) -> None:
        """Mark the scope so that :meth:`end` rolls the transaction back."""
        self._rollback_only = True

    def end(self, error: Optional[BaseException] = None) -> None:
        """Finish the transaction, if one was begun.

        With ``error`` the transaction is rolled back and any rollback failure
        is ignored, so the original error stays the one reported. Otherwise it
        is committed, or rolled back when :meth:`rollback` was called, and a
        failure to do so is raised.
        """
        tx, self.tx = self.tx, None
        if tx is None:
            return
        if error is not None:
            try:
                tx.rollback()
            except Exception:
                pass
            return
        if self._rollback_only:
            tx.rollback()
        else:
            tx.commit()


def current_scope() -> Optional[TxScope]:
    """Return the transaction scope active in the current context, if any."""
    return _current.get()


@contextmanager
def scope_options(
    require_new: bool = False, level: Optional[IsolationLevel] = None
) -> Iterator[TxScope]:
    """Enter a transaction scope with the given isolation level.

    An existing scope is reused unless ``require_new`` is true; the scope
    yielded then is inert and the outer one keeps its transaction. On exit the
    scope is ended: committed normally, rolled back on an exception.
    """
    tx_scope = TxScope(DEFAULT_LEVEL if level is None else level)
    token = None
    if require_new or _current.get() is None:
        token = _current.set(tx_scope)
    try:
        yield tx_scope
    except BaseException as exc:
        tx_scope.end(exc)
        raise
    else:
        tx_scope.end()
    finally:
        if token is not None:
            _current.reset(token)


def scope() -> "contextmanager":
    """Enter a transaction scope, reusing one that is already active."""
    return scope_options(False, DEFAULT_LEVEL)


@contextmanager
def suppress_scope() -> Iterator[None]:
    """Run the enclosed code with no active transaction scope."""
    token = _current.set(None)
    try:
        yield
    finally:
        _current.reset(token)


def get(factory: Factory) -> Executor:
    """Return the scope's transaction, beginning it if needed, or a connection.

    Outside a scope a fresh connection is taken from ``factory``.
    """
    tx_scope = _current.get()
    if tx_scope is None:
        return factory.get_connection()
    if tx_scope.tx is not None:
        return tx_scope.tx
    tx = factory.get_transaction(tx_scope.level)
    tx_scope.tx = tx
    return tx