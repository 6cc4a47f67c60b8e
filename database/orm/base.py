# database/orm/base.py
from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from database.database import Base
from database.errors import InvalidField, NotFound, integrity_guard
from database.schema import WRITABLE_COLUMNS, utcnow

M = TypeVar("M", bound=Base)


class OrmService(Generic[M]):
    """
    Unit-of-work access to one mapped class.

    Every call opens its own session, flushes once and commits; the
    instances handed back stay readable after the session is gone
    (``expire_on_commit=False`` on the factory). Only columns are readable
    on them; relationships are ``lazy="raise"``.
    """

    model: type[M]
    entity: str

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    def _check_fields(self, fields: dict[str, Any]) -> None:
        unknown = set(fields) - WRITABLE_COLUMNS[self.model.__table__.name]
        if unknown:
            raise InvalidField(self.entity, unknown)

    # ───────────────────────────  CREATE
    async def _insert(self, **fields: Any) -> M:
        self._check_fields(fields)
        async with self.session_factory() as ses:
            obj = self.model(**fields)
            ses.add(obj)
            async with integrity_guard(ses, self.entity):
                await ses.commit()
        logging.info("%s %s created", self.entity, obj.id)
        return obj

    # ───────────────────────────  READ
    async def find_all(self) -> list[M]:
        async with self.session_factory() as ses:
            res = await ses.scalars(select(self.model).order_by(self.model.id))
            return list(res.all())

    async def find_one(self, id: int) -> M | None:
        async with self.session_factory() as ses:
            obj = await ses.get(self.model, id)
        logging.debug("%s %s lookup: %s", self.entity, id, "hit" if obj else "miss")
        return obj

    # ───────────────────────────  UPDATE
    async def update(self, id: int, **fields: Any) -> M:
        self._check_fields(fields)
        async with self.session_factory() as ses:
            obj = await ses.get(self.model, id)
            if obj is None:
                raise NotFound(self.entity, id)
            if not fields:
                return obj

            for name, value in fields.items():
                setattr(obj, name, value)
            # explicit value wins over the column onupdate and stays on the instance
            if "updated_at" in self.model.__table__.c:
                obj.updated_at = utcnow()

            async with integrity_guard(ses, self.entity):
                await ses.commit()
        logging.info("%s %s updated (%s)", self.entity, id, ", ".join(sorted(fields)))
        return obj

    # ───────────────────────────  DELETE
    async def remove(self, id: int) -> None:
        async with self.session_factory() as ses:
            obj = await ses.get(self.model, id)
            if obj is None:
                raise NotFound(self.entity, id)
            await ses.delete(obj)   # dependants go through ON DELETE CASCADE
            await ses.commit()
        logging.info("%s %s removed", self.entity, id)
