# database/core/base.py
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from database.errors import InvalidField, NotFound, integrity_guard
from database.schema import WRITABLE_COLUMNS


class CoreService:
    """
    Statement-level access to one table.

    No mapped objects: every call is a single INSERT / SELECT / UPDATE /
    DELETE and rows come back as plain dicts keyed by column name.
    """

    table: Table
    entity: str

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    def _check_fields(self, fields: dict[str, Any]) -> None:
        unknown = set(fields) - WRITABLE_COLUMNS[self.table.name]
        if unknown:
            raise InvalidField(self.entity, unknown)

    # ───────────────────────────  CREATE
    async def _insert(self, **fields: Any) -> dict[str, Any]:
        self._check_fields(fields)
        stmt = insert(self.table).values(**fields).returning(*self.table.c)
        async with self.session_factory() as ses:
            async with integrity_guard(ses, self.entity):
                row = dict((await ses.execute(stmt)).mappings().one())
                await ses.commit()
        logging.info("%s %s created", self.entity, row["id"])
        return row

    # ───────────────────────────  READ
    async def find_all(self) -> list[dict[str, Any]]:
        stmt = select(self.table).order_by(self.table.c.id)
        async with self.session_factory() as ses:
            res = await ses.execute(stmt)
            return [dict(r) for r in res.mappings().all()]

    async def find_one(self, id: int) -> dict[str, Any] | None:
        stmt = select(self.table).where(self.table.c.id == id)
        async with self.session_factory() as ses:
            row = (await ses.execute(stmt)).mappings().one_or_none()
        logging.debug("%s %s lookup: %s", self.entity, id, "hit" if row else "miss")
        return dict(row) if row is not None else None

    # ───────────────────────────  UPDATE
    async def update(self, id: int, **fields: Any) -> dict[str, Any]:
        self._check_fields(fields)
        if not fields:
            row = await self.find_one(id)
            if row is None:
                raise NotFound(self.entity, id)
            return row

        # updated_at is filled in by the column's onupdate
        stmt = (
            update(self.table)
            .where(self.table.c.id == id)
            .values(**fields)
            .returning(*self.table.c)
        )
        async with self.session_factory() as ses:
            async with integrity_guard(ses, self.entity):
                row = (await ses.execute(stmt)).mappings().one_or_none()
                if row is None:
                    raise NotFound(self.entity, id)
                row = dict(row)
                await ses.commit()
        logging.info("%s %s updated (%s)", self.entity, id, ", ".join(sorted(fields)))
        return row

    # ───────────────────────────  DELETE
    async def remove(self, id: int) -> None:
        stmt = delete(self.table).where(self.table.c.id == id)
        async with self.session_factory() as ses:
            res = await ses.execute(stmt)
            if res.rowcount == 0:
                raise NotFound(self.entity, id)
            await ses.commit()
        logging.info("%s %s removed", self.entity, id)
