"""Pytest configuration and fixtures."""
import pytest
import pytest_asyncio

from database import core, orm
from database.database import init_db, make_engine, make_sessionmaker

FLAVOURS = {"orm": orm, "core": core}


@pytest.fixture
def db_url(tmp_path):
    """SQLite file private to one test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite3'}"


@pytest_asyncio.fixture
async def engine(db_url):
    engine = make_engine(db_url, echo=False)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_sessionmaker(engine)


@pytest.fixture(params=sorted(FLAVOURS))
def flavour(request):
    """Every service test runs once per access flavour."""
    return FLAVOURS[request.param]


@pytest.fixture
def users(flavour, session_factory):
    return flavour.UsersService(session_factory)


@pytest.fixture
def posts(flavour, session_factory):
    return flavour.PostsService(session_factory)


@pytest.fixture
def likes(flavour, session_factory):
    return flavour.LikesService(session_factory)


@pytest.fixture
def field():
    """Read a column off either an ORM instance or a Core dict."""
    def _field(entity, name):
        return entity[name] if isinstance(entity, dict) else getattr(entity, name)
    return _field


@pytest_asyncio.fixture
async def alice(users):
    return await users.create(name="Alice", email="a@x.com")


@pytest_asyncio.fixture
async def bob(users):
    return await users.create(name="Bob", email="b@x.com")
