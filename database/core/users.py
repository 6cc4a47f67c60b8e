from typing import Any

from database.core.base import CoreService
from database.schema import users


class UsersService(CoreService):
    table = users
    entity = "User"

    async def create(self, name: str, email: str) -> dict[str, Any]:
        return await self._insert(name=name, email=email)
