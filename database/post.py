# database/post.py
from __future__ import annotations

from sqlalchemy.orm import Mapped, relationship

from database.database import Base
from database.schema import posts


class Post(Base):
    __table__ = posts   # author_id → users.id, ON DELETE CASCADE

    author: Mapped["User"] = relationship(back_populates="posts", lazy="raise")
    likes:  Mapped[list["Like"]] = relationship(
        back_populates="post", cascade="all, delete", passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Post id={self.id} author_id={self.author_id}>"
