# Overview: Storage gateway; runs parameterized SQL against the POS database.

"""
Storage Gateway

Every repository in litepos.services goes through these functions instead of
the ORM. Statements are plain SQL with named bind parameters (":name"), and
rows come back as dicts keyed by column name.

CONNECTION: The engine is created lazily by Flask-SQLAlchemy on first use and
reused for the lifetime of the application. There is no explicit teardown.

COMMITS: execute() commits immediately unless it runs inside transaction(),
in which case the outermost transaction() block commits once at the end.

FAILURES: Errors are logged and the original exception is re-raised
unmodified. Outside transaction() the session is rolled back so it stays
usable. Inside one, nothing is undone until the exception leaves the
outermost block; a caller that catches the error and carries on keeps the
statements issued so far, and they commit with the rest. There is no retry.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional

from flask import current_app, g
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .extensions import db


Params = Optional[Mapping[str, Any]]


@dataclass(frozen=True)
class ExecuteResult:
    rows_affected: int
    last_insert_id: int


def _tx_depth() -> int:
    return g.get("_litepos_tx_depth", 0)


def _rollback_unless_in_transaction() -> None:
    # Inside transaction() the outermost block owns the rollback
    if _tx_depth() == 0:
        db.session.rollback()


def _log_failure(statement: str) -> None:
    limit = current_app.config.get("SQL_LOG_MAX_CHARS", 200)
    current_app.logger.exception("Statement failed: %s", " ".join(statement.split())[:limit])


def execute(statement: str, params: Params = None) -> ExecuteResult:
    """Run a write statement and report affected rows and the last insert id."""
    try:
        result = db.session.execute(text(statement), dict(params or {}))
        outcome = ExecuteResult(
            rows_affected=result.rowcount,
            last_insert_id=result.lastrowid or 0,
        )
        if _tx_depth() == 0:
            db.session.commit()
    except SQLAlchemyError:
        _log_failure(statement)
        _rollback_unless_in_transaction()
        raise
    return outcome


def query(statement: str, params: Params = None) -> list[dict]:
    """Run a read statement and return every row as a dict, in order."""
    try:
        result = db.session.execute(text(statement), dict(params or {}))
        return [dict(row._mapping) for row in result]
    except SQLAlchemyError:
        _log_failure(statement)
        _rollback_unless_in_transaction()
        raise


def query_one(statement: str, params: Params = None) -> dict | None:
    """First row of query(), or None when nothing matches."""
    rows = query(statement, params)
    return rows[0] if rows else None


@contextmanager
def transaction() -> Iterator[None]:
    """
    Group several execute() calls into one commit.

    Nested blocks join the outermost one. Any exception rolls back every
    statement issued inside the outermost block and propagates.
    """
    depth = _tx_depth()
    g._litepos_tx_depth = depth + 1
    try:
        yield
    except Exception:
        g._litepos_tx_depth = depth
        if depth == 0:
            db.session.rollback()
        raise
    g._litepos_tx_depth = depth
    if depth == 0:
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
