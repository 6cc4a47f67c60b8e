from database.orm.base import OrmService
from database.user import User


class UsersService(OrmService[User]):
    model = User
    entity = "User"

    async def create(self, name: str, email: str) -> User:
        return await self._insert(name=name, email=email)
