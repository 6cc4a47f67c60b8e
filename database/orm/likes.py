from database.like import Like
from database.orm.base import OrmService


class LikesService(OrmService[Like]):
    model = Like
    entity = "Like"

    async def create(self, user_id: int, post_id: int) -> Like:
        # a second like on the same post raises UniquenessViolation
        return await self._insert(user_id=user_id, post_id=post_id)
