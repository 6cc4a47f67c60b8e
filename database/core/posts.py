from typing import Any

from database.core.base import CoreService
from database.schema import posts


class PostsService(CoreService):
    table = posts
    entity = "Post"

    async def create(self, title: str, content: str, author_id: int) -> dict[str, Any]:
        return await self._insert(title=title, content=content, author_id=author_id)
