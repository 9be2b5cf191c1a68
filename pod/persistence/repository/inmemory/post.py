"""In-memory post repository for testing."""

from typing import List, Optional

from pod.domain.model.post import Post
from pod.domain.repository.post import PostRepository
from pod.domain.value import IdentityId, PostId
from pod.persistence.repository.inmemory.store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_by_author(self, author_id: IdentityId) -> List[Post]:
        """Find posts owned by an identity."""
        posts = [p for p in self._store.posts.values() if p.author_id == author_id]
        posts.sort(key=lambda p: p.created_at)
        return posts

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._store.posts[post.id] = post
        return post

    async def delete_by_author(self, author_id: IdentityId) -> int:
        """Delete posts owned by an identity."""
        doomed = [pid for pid, p in self._store.posts.items() if p.author_id == author_id]
        for post_id in doomed:
            del self._store.posts[post_id]
        return len(doomed)

    async def count(self) -> int:
        """Count posts."""
        return len(self._store.posts)
