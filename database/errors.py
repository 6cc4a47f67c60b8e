# database/errors.py
"""
Failures surfaced by the access services.

The drivers report constraint problems as a bare ``IntegrityError``;
``translate`` turns it into something a caller can tell apart.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession


class ModelError(Exception):
    """Base class for every error raised by the access layer."""


class UniquenessViolation(ModelError):
    """Duplicate ``users.email`` or duplicate ``likes(user_id, post_id)``."""


class ForeignKeyViolation(ModelError):
    """``author_id`` / ``user_id`` / ``post_id`` points at no existing row."""


class NotFound(ModelError, LookupError):
    def __init__(self, entity: str, id: int):
        super().__init__(f"{entity} {id} not found")
        self.entity = entity
        self.id = id


class InvalidField(ModelError, ValueError):
    def __init__(self, entity: str, fields):
        names = ", ".join(sorted(fields))
        super().__init__(f"{entity} has no writable field(s): {names}")
        self.entity = entity
        self.fields = frozenset(fields)


# SQLSTATE classes reported by asyncpg / psycopg
_UNIQUE_SQLSTATE = "23505"
_FOREIGN_KEY_SQLSTATE = "23503"


# Message phrases (SQLite, PostgreSQL) for drivers that give no SQLSTATE
_UNIQUE_MESSAGES = ("unique constraint failed", "violates unique constraint")
_FOREIGN_KEY_MESSAGES = ("foreign key constraint failed", "violates foreign key constraint")


def _mentions(text: str, fragments: tuple[str, ...]) -> bool:
    return any(f in text for f in fragments)


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def translate(exc: IntegrityError) -> ModelError | IntegrityError:
    """Map an ``IntegrityError`` onto the taxonomy above.

    Anything that is neither a uniqueness nor a foreign-key problem (a NOT
    NULL failure for instance) comes back unchanged.
    """
    code = _sqlstate(exc)
    text = str(exc.orig).lower()

    if code == _UNIQUE_SQLSTATE or (code is None and _mentions(text, _UNIQUE_MESSAGES)):
        return UniquenessViolation(str(exc.orig))
    if code == _FOREIGN_KEY_SQLSTATE or (code is None and _mentions(text, _FOREIGN_KEY_MESSAGES)):
        return ForeignKeyViolation(str(exc.orig))
    return exc


@asynccontextmanager
async def integrity_guard(ses: AsyncSession, entity: str):
    """Roll back and re-raise constraint failures as ``ModelError``s."""
    try:
        yield
    except IntegrityError as e:
        await ses.rollback()
        err = translate(e)
        logging.warning("%s write rejected: %s", entity, err)
        if err is e:
            raise
        raise err from e
