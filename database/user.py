from __future__ import annotations

from sqlalchemy.orm import Mapped, relationship

from database.database import Base
from database.schema import users


class User(Base):
    """
    Member of the network. Email is unique across all users.

    Relationships are ``lazy="raise"``: instances handed out by the services
    carry column attributes only, reading ``posts`` / ``likes`` raises.
    """

    __table__ = users   # id, name, email, created_at, updated_at

    # children are removed by ON DELETE CASCADE, never loaded for that
    posts: Mapped[list["Post"]] = relationship(
        back_populates="author", cascade="all, delete", passive_deletes=True,
        lazy="raise",
    )
    likes: Mapped[list["Like"]] = relationship(
        back_populates="user", cascade="all, delete", passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
