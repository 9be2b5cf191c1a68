"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pod.domain.model import Post
from pod.domain.repository import PostRepository
from pod.domain.value import IdentityId, PostId
from pod.persistence.mappers import post_to_dict, row_to_post
from pod.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_author(self, author_id: IdentityId) -> List[Post]:
        """Find posts owned by an identity."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(posts_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)
        existing = await self.find_by_id(post.id)
        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete_by_author(self, author_id: IdentityId) -> int:
        """Delete posts owned by an identity."""
        result = await self.session.execute(
            posts_table.delete().where(posts_table.c.author_id == author_id)
        )
        await self.session.flush()
        return result.rowcount

    async def count(self) -> int:
        """Count posts."""
        result = await self.session.execute(
            select(func.count()).select_from(posts_table)
        )
        return result.scalar_one()
