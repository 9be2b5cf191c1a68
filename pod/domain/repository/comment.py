"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from pod.domain.model.comment import Comment
from pod.domain.value import CommentId, IdentityId, PostId


class CommentRepository(ABC):
    """Repository for comments."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: IdentityId) -> List[Comment]:
        """Find all comments written by an identity, on any post.

        Args:
            author_id: The author's identity ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete_by_posts(self, post_ids: Sequence[PostId]) -> int:
        """Delete every comment attached to the given posts.

        Args:
            post_ids: Posts whose comments are deleted

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all comments.

        Returns:
            Number of stored comments
        """
        pass
