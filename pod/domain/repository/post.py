"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pod.domain.model.post import Post
from pod.domain.value import IdentityId, PostId


class PostRepository(ABC):
    """Repository for posts."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: IdentityId) -> List[Post]:
        """Find all posts owned by an identity, oldest first.

        Args:
            author_id: The owning identity

        Returns:
            List of posts (may be empty)
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete_by_author(self, author_id: IdentityId) -> int:
        """Delete every post owned by an identity.

        Comments on those posts must be deleted first.

        Args:
            author_id: The owning identity

        Returns:
            Number of posts deleted
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all posts.

        Returns:
            Number of stored posts
        """
        pass
