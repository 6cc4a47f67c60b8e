# compare.py
"""
Run the same scenario through both access flavours and log what happens.

    python compare.py            # throw-away SQLite file per flavour
    python compare.py orm        # only one flavour
"""
from __future__ import annotations

import asyncio
import logging
import sys
import tempfile
from pathlib import Path

from config import LOG_LEVEL
from database import core, orm
from database.database import lifespan
from database.errors import ModelError, UniquenessViolation

FLAVOURS = {"orm": orm, "core": core}


def _field(entity, name):
    # ORM hands back instances, Core hands back dicts
    return entity[name] if isinstance(entity, dict) else getattr(entity, name)


async def scenario(flavour: str, url: str) -> list[str]:
    """Alice posts, likes her own post twice, then leaves. Returns the log lines."""
    pkg = FLAVOURS[flavour]
    out: list[str] = []

    async with lifespan(url) as session_factory:
        users = pkg.UsersService(session_factory)
        posts = pkg.PostsService(session_factory)
        likes = pkg.LikesService(session_factory)

        alice = await users.create(name="Alice", email="a@x.com")
        out.append(f"user   #{_field(alice, 'id')} {_field(alice, 'email')}")

        post = await posts.create(title="Hi", content="World", author_id=_field(alice, "id"))
        out.append(f"post   #{_field(post, 'id')} by #{_field(post, 'author_id')}")

        like = await likes.create(user_id=_field(alice, "id"), post_id=_field(post, "id"))
        out.append(f"like   #{_field(like, 'id')}")

        try:
            await likes.create(user_id=_field(alice, "id"), post_id=_field(post, "id"))
            out.append("second like accepted (unexpected)")
        except UniquenessViolation:
            out.append("second like rejected: UniquenessViolation")

        await users.remove(_field(alice, "id"))
        left_post = await posts.find_one(_field(post, "id"))
        left_like = await likes.find_one(_field(like, "id"))
        out.append(f"after user delete: post={left_post!r} like={left_like!r}")

    return out


async def main(flavours: list[str]) -> int:
    with tempfile.TemporaryDirectory() as tmp:
        for name in flavours:
            url = f"sqlite+aiosqlite:///{Path(tmp) / f'{name}.sqlite3'}"
            try:
                lines = await scenario(name, url)
            except ModelError as e:
                logging.error("[%s] scenario failed: %s", name, e)
                return 1
            for line in lines:
                logging.info("[%s] %s", name, line)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    wanted = sys.argv[1:] or list(FLAVOURS)
    unknown = [w for w in wanted if w not in FLAVOURS]
    if unknown:
        sys.exit(f"unknown flavour(s): {', '.join(unknown)} (choose from {', '.join(FLAVOURS)})")
    sys.exit(asyncio.run(main(wanted)))
