# database/schema.py
"""
Table declarations shared by both access flavours.

Both the mapped classes (``database.user`` etc.) and the Core services
build on the tables below, so every constraint lives here and only here.
"""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column, DateTime, ForeignKey, Integer, MetaData, String, Table, Text,
    UniqueConstraint,
)


def utcnow() -> datetime:
    """Naive UTC timestamp (SQLite drops tzinfo anyway)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


metadata = MetaData()

# sqlite_autoincrement: ids are never handed out twice, even after the
# newest row is deleted (plain SQLite rowids reuse max(id) + 1)


# ───────────────────────────────  USERS  ──────────────────────────────────
users = Table(
    "users", metadata,
    Column("id",         Integer, primary_key=True, autoincrement=True),
    Column("name",       String(255), nullable=False),
    Column("email",      String(255), nullable=False),
    Column("created_at", DateTime, nullable=False, default=utcnow),
    Column("updated_at", DateTime, nullable=False, default=utcnow, onupdate=utcnow),
    UniqueConstraint("email", name="uq_users_email"),
    sqlite_autoincrement=True,
)


# ───────────────────────────────  POSTS  ──────────────────────────────────
posts = Table(
    "posts", metadata,
    Column("id",         Integer, primary_key=True, autoincrement=True),
    Column("title",      String(255), nullable=False),
    Column("content",    Text, nullable=False),
    Column("author_id",  Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("created_at", DateTime, nullable=False, default=utcnow),
    Column("updated_at", DateTime, nullable=False, default=utcnow, onupdate=utcnow),
    sqlite_autoincrement=True,
)


# ───────────────────────────────  LIKES  ──────────────────────────────────
likes = Table(
    "likes", metadata,
    Column("id",         Integer, primary_key=True, autoincrement=True),
    Column("user_id",    Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("post_id",    Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("created_at", DateTime, nullable=False, default=utcnow),
    UniqueConstraint("user_id", "post_id", name="uq_likes_user_post"),  # 1 like / user / post
    sqlite_autoincrement=True,
)


# Fields a caller may set through create / update
WRITABLE_COLUMNS: dict[str, frozenset[str]] = {
    "users": frozenset({"name", "email"}),
    "posts": frozenset({"title", "content", "author_id"}),
    "likes": frozenset({"user_id", "post_id"}),
}
