from __future__ import annotations

from sqlalchemy.orm import Mapped, relationship

from database.database import Base
from database.schema import likes


class Like(Base):
    __table__ = likes   # UNIQUE (user_id, post_id) : 1 like / user / post

    user: Mapped["User"] = relationship(back_populates="likes", lazy="raise")
    post: Mapped["Post"] = relationship(back_populates="likes", lazy="raise")

    def __repr__(self) -> str:
        return f"<Like id={self.id} user_id={self.user_id} post_id={self.post_id}>"
