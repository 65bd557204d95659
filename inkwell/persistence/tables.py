"""SQLAlchemy table definitions for Inkwell.

These table definitions are used with SQLAlchemy Core and the manual
mappers in ``inkwell.persistence.mappers``. They match the schema defined
in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

from inkwell.domain.value import TAG_MAX_LENGTH

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=False),
    Column("content_url", Text, nullable=True),
    Column("summary", Text, nullable=False),
    Column(
        "tags",
        ARRAY(String(TAG_MAX_LENGTH)),
        nullable=False,
        server_default=text("'{}'"),
    ),
    Column("created_at", TIMESTAMP(timezone=False), nullable=False),
    Column("modified_at", TIMESTAMP(timezone=False), nullable=False),
    Column("visible", Boolean, nullable=False, server_default=text("true")),
    # Backstop for the service-level title check
    UniqueConstraint("title", name="uq_posts_title"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_tags", posts_table.c.tags, postgresql_using="gin")
