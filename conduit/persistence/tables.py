"""SQLAlchemy table definitions for Conduit.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

Relationships are stored as id arrays on the owning row (a user's
``following`` and ``favorites``, an article's ``comment_ids``) and are
weak: deleting a row does not cascade into arrays that mention it.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_salt", String(64), nullable=True),
    Column("password_hash", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("image", Text, nullable=False),
    Column("following", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("favorites", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
)

# GIN index backs the favorites recount
Index("idx_users_favorites", users_table.c.favorites, postgresql_using="gin")

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(100), nullable=False, unique=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("body", Text, nullable=False, server_default=""),
    Column("tag_list", ARRAY(String), nullable=False, server_default="{}"),
    Column("favorites_count", Integer, nullable=False, server_default="0"),
    Column("author_id", UUID, nullable=False),
    Column("comment_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("favorites_count >= 0", name="favorites_count_non_negative"),
)

Index("idx_articles_created_at", articles_table.c.created_at.desc())
Index("idx_articles_author_id", articles_table.c.author_id)
Index("idx_articles_tag_list", articles_table.c.tag_list, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("body", Text, nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("article_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_created_at", comments_table.c.created_at)
