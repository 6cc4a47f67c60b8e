# create_db.py
import asyncio
import logging

from config import DB_PATH, LOG_LEVEL
from database.database import make_engine, init_db


async def create(url: str = DB_PATH) -> None:
    """Create every table (users, posts, likes) on the configured database."""
    engine = make_engine(url)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()
    logging.info("Database initialised: %s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    asyncio.run(create())
