"""In-memory comment repository for testing."""

from typing import List, Optional, Sequence

from pod.domain.model.comment import Comment
from pod.domain.repository.comment import CommentRepository
from pod.domain.value import CommentId, IdentityId, PostId
from pod.persistence.repository.inmemory.store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find comments on a post."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_author(self, author_id: IdentityId) -> List[Comment]:
        """Find comments written by an identity."""
        comments = [
            c for c in self._store.comments.values() if c.author_id == author_id
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def delete_by_posts(self, post_ids: Sequence[PostId]) -> int:
        """Delete comments attached to the given posts."""
        targets = set(post_ids)
        doomed = [
            cid for cid, c in self._store.comments.items() if c.post_id in targets
        ]
        for comment_id in doomed:
            del self._store.comments[comment_id]
        return len(doomed)

    async def count(self) -> int:
        """Count comments."""
        return len(self._store.comments)
