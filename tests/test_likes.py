"""Likes service, run against both access flavours."""
import pytest
import pytest_asyncio

from database.errors import ForeignKeyViolation, InvalidField, NotFound, UniquenessViolation


@pytest_asyncio.fixture
async def hello(posts, alice, field):
    return await posts.create(title="Hi", content="World", author_id=field(alice, "id"))


@pytest_asyncio.fixture
async def again(posts, alice, field):
    return await posts.create(title="Again", content="!", author_id=field(alice, "id"))


class TestCreate:
    async def test_returns_full_entity(self, likes, alice, hello, field):
        like = await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        assert field(like, "id") == 1
        assert field(like, "user_id") == field(alice, "id")
        assert field(like, "post_id") == field(hello, "id")
        assert field(like, "created_at") is not None

    async def test_id_not_reused_after_newest_removed(self, likes, alice, hello, field):
        like = await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        await likes.remove(field(like, "id"))
        again = await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))

        assert field(again, "id") > field(like, "id")
        assert await likes.find_one(field(like, "id")) is None

    async def test_same_pair_twice_rejected(self, likes, alice, hello, field):
        await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        with pytest.raises(UniquenessViolation):
            await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        assert len(await likes.find_all()) == 1

    async def test_same_user_other_post(self, likes, alice, hello, again, field):
        await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        await likes.create(user_id=field(alice, "id"), post_id=field(again, "id"))
        assert len(await likes.find_all()) == 2

    async def test_other_user_same_post(self, likes, alice, bob, hello, field):
        await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        await likes.create(user_id=field(bob, "id"), post_id=field(hello, "id"))
        assert len(await likes.find_all()) == 2

    async def test_unknown_user_rejected(self, likes, hello, field):
        with pytest.raises(ForeignKeyViolation):
            await likes.create(user_id=999, post_id=field(hello, "id"))

    async def test_unknown_post_rejected(self, likes, alice, field):
        with pytest.raises(ForeignKeyViolation):
            await likes.create(user_id=field(alice, "id"), post_id=999)


class TestRead:
    async def test_find_all_and_one(self, likes, alice, bob, hello, field):
        first = await likes.create(user_id=field(bob, "id"), post_id=field(hello, "id"))
        await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))

        assert [field(x, "user_id") for x in await likes.find_all()] == [
            field(bob, "id"), field(alice, "id"),
        ]
        assert field(await likes.find_one(field(first, "id")), "user_id") == field(bob, "id")
        assert await likes.find_one(999) is None


class TestUpdate:
    async def test_move_like_to_other_post(self, likes, alice, hello, again, field):
        like = await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        moved = await likes.update(field(like, "id"), post_id=field(again, "id"))

        assert field(moved, "post_id") == field(again, "id")
        assert field(moved, "user_id") == field(alice, "id")
        assert field(moved, "created_at") == field(like, "created_at")

    async def test_move_onto_existing_pair_rejected(self, likes, alice, hello, again, field):
        await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        second = await likes.create(user_id=field(alice, "id"), post_id=field(again, "id"))

        with pytest.raises(UniquenessViolation):
            await likes.update(field(second, "id"), post_id=field(hello, "id"))
        found = await likes.find_one(field(second, "id"))
        assert field(found, "post_id") == field(again, "id")

    async def test_move_to_unknown_post_rejected(self, likes, alice, hello, field):
        like = await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        with pytest.raises(ForeignKeyViolation):
            await likes.update(field(like, "id"), post_id=999)

    async def test_missing_id_raises(self, likes):
        with pytest.raises(NotFound):
            await likes.update(7, post_id=1)

    async def test_created_at_not_writable(self, likes, alice, hello, field):
        like = await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        with pytest.raises(InvalidField):
            await likes.update(field(like, "id"), created_at=None)


class TestRemove:
    async def test_removes_like_only(self, likes, posts, users, alice, hello, field):
        like = await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        await likes.remove(field(like, "id"))

        assert await likes.find_one(field(like, "id")) is None
        assert await posts.find_one(field(hello, "id")) is not None
        assert await users.find_one(field(alice, "id")) is not None

    async def test_missing_id_raises(self, likes):
        with pytest.raises(NotFound):
            await likes.remove(7)

    async def test_can_like_again_after_remove(self, likes, alice, hello, field):
        like = await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        await likes.remove(field(like, "id"))
        await likes.create(user_id=field(alice, "id"), post_id=field(hello, "id"))
        assert len(await likes.find_all()) == 1
