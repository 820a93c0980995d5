"""PostgreSQL implementation of Comment repository."""

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import List, Optional, TypeVar

from sqlalchemy import asc, desc, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from commenttree.config import RetrySettings
from commenttree.domain.error import ParentNotFoundError
from commenttree.domain.model import Comment
from commenttree.domain.repository import CommentRepository
from commenttree.domain.value import (
    CommentId,
    MaterializedPath,
    PathId,
    SortField,
    SortOrder,
)
from commenttree.persistence.mappers import row_to_comment
from commenttree.persistence.retry import run_with_retry
from commenttree.persistence.tables import comments_table

T = TypeVar("T")

FOREIGN_KEY_VIOLATION = "23503"

_SORT_COLUMNS = {
    SortField.ID: comments_table.c.id,
    SortField.CREATED_AT: comments_table.c.created_at,
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Subtree reads and deletes are single statements over a path prefix.
    Every statement is retried on transient errors; see run_with_retry.
    """

    def __init__(self, session: AsyncSession, retry: RetrySettings) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            retry: Retry policy for transient failures
        """
        self.session = session
        self.retry = retry

    async def _run(self, name: str, operation: Callable[[], Awaitable[T]]) -> T:
        return await run_with_retry(
            operation, self.retry, name, on_failure=self.session.rollback
        )

    async def insert(
        self,
        parent_id: Optional[CommentId],
        path_id: PathId,
        path: MaterializedPath,
        text: str,
        created_at: datetime,
    ) -> Comment:
        """Insert a comment, deduplicating retries on path_id.

        A retry after an ambiguous failure reuses the same path_id, so a row
        that did get written is found again instead of duplicated.
        """
        stmt = (
            pg_insert(comments_table)
            .values(
                parent_id=parent_id,
                path_id=path_id,
                path=path.root,
                comment=text,
                created_at=created_at,
            )
            .on_conflict_do_nothing(index_elements=[comments_table.c.path_id])
            .returning(comments_table)
        )

        async def _insert() -> Comment:
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is None:
                existing = await self.session.execute(
                    select(comments_table).where(comments_table.c.path_id == path_id)
                )
                row = existing.one()
            await self.session.flush()
            return row_to_comment(row._asdict())

        try:
            return await self._run("insert", _insert)
        except IntegrityError as e:
            if parent_id is not None and _sqlstate(e) == FOREIGN_KEY_VIOLATION:
                # Parent was deleted between the path lookup and the insert
                await self.session.rollback()
                raise ParentNotFoundError(parent_id) from e
            raise

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)

        async def _find() -> Optional[Comment]:
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_comment(row._asdict()) if row else None

        return await self._run("find_by_id", _find)

    async def find_path(self, comment_id: CommentId) -> Optional[MaterializedPath]:
        """Find only the path of a comment."""
        stmt = select(comments_table.c.path).where(comments_table.c.id == comment_id)

        async def _find() -> Optional[MaterializedPath]:
            result = await self.session.execute(stmt)
            path = result.scalar_one_or_none()
            return MaterializedPath(path) if path is not None else None

        return await self._run("find_path", _find)

    async def find_by_path_prefix(self, prefix: MaterializedPath) -> List[Comment]:
        """Find a comment and all of its descendants."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.path.startswith(prefix.root, autoescape=True))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )

        async def _find() -> List[Comment]:
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

        return await self._run("find_by_path_prefix", _find)

    async def delete_by_path_prefix(self, prefix: MaterializedPath) -> int:
        """Delete a comment and all of its descendants."""
        stmt = comments_table.delete().where(
            comments_table.c.path.startswith(prefix.root, autoescape=True)
        )

        async def _delete() -> int:
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount or 0

        return await self._run("delete_by_path_prefix", _delete)

    async def count_top_level(self) -> int:
        """Count top-level comments."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id.is_(None))
        )

        async def _count() -> int:
            result = await self.session.execute(stmt)
            return result.scalar() or 0

        return await self._run("count_top_level", _count)

    async def find_top_level(
        self,
        limit: int,
        offset: int,
        sort_by: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.ASC,
    ) -> List[Comment]:
        """Find a page of top-level comments."""
        direction = desc if sort_order == SortOrder.DESC else asc
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.is_(None))
            # id breaks created_at ties so pages never overlap
            .order_by(
                direction(_SORT_COLUMNS[sort_by]), direction(comments_table.c.id)
            )
            .limit(limit)
            .offset(offset)
        )

        async def _find() -> List[Comment]:
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

        return await self._run("find_top_level", _find)

    async def search_text(self, substring: str, limit: int = 50) -> List[Comment]:
        """Case-insensitive substring search, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.comment.icontains(substring, autoescape=True))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
        )

        async def _search() -> List[Comment]:
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

        return await self._run("search_text", _search)


def _sqlstate(error: IntegrityError) -> str | None:
    """Extract the SQLSTATE code from a driver error."""
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
