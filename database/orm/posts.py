from database.orm.base import OrmService
from database.post import Post


class PostsService(OrmService[Post]):
    model = Post
    entity = "Post"

    async def create(self, title: str, content: str, author_id: int) -> Post:
        return await self._insert(title=title, content=content, author_id=author_id)
