from .users import UsersService
from .posts import PostsService
from .likes import LikesService

__all__ = ["UsersService", "PostsService", "LikesService"]
