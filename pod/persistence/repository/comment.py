"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pod.domain.model import Comment
from pod.domain.repository import CommentRepository
from pod.domain.value import CommentId, IdentityId, PostId
from pod.persistence.mappers import comment_to_dict, row_to_comment
from pod.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find comments on a post."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: IdentityId) -> List[Comment]:
        """Find comments written by an identity."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)
        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete_by_posts(self, post_ids: Sequence[PostId]) -> int:
        """Delete comments attached to the given posts."""
        if not post_ids:
            return 0
        result = await self.session.execute(
            comments_table.delete().where(comments_table.c.post_id.in_(post_ids))
        )
        await self.session.flush()
        return result.rowcount

    async def count(self) -> int:
        """Count comments."""
        result = await self.session.execute(
            select(func.count()).select_from(comments_table)
        )
        return result.scalar_one()
