from typing import Any

from database.core.base import CoreService
from database.schema import likes


class LikesService(CoreService):
    table = likes
    entity = "Like"

    async def create(self, user_id: int, post_id: int) -> dict[str, Any]:
        return await self._insert(user_id=user_id, post_id=post_id)
