"""SQLAlchemy table definitions for the comment store.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "parent_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("path_id", UUID(as_uuid=True), nullable=False, unique=True),
    Column("path", Text, nullable=False, unique=True),  # Materialized path, e.g. "a/b/"
    Column("comment", Text, nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("length(comment) > 0", name="comment_not_empty"),
)

# Prefix matching (path LIKE 'x/%') needs pattern ops under non-C collations
Index(
    "idx_comments_path_pattern",
    comments_table.c.path,
    postgresql_ops={"path": "text_pattern_ops"},
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index(
    "idx_comments_top_level_created_at",
    comments_table.c.created_at,
    postgresql_where=comments_table.c.parent_id.is_(None),
)
