"""Post and comment domain service."""

from uuid import uuid4

import logfire

from pod.domain.error import NotFoundError
from pod.domain.model import Comment, Identity, Post, utcnow
from pod.domain.repository import CommentRepository, PostRepository
from pod.domain.value import CommentId, PostId

from .base import Service


class PostService(Service):
    """Domain service for the content people own and comment on."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def create_post(self, author: Identity, text: str) -> Post:
        """Create a post owned by an identity.

        Args:
            author: Owning identity
            text: Post body

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            author=author.account_identifier.root,
        ):
            post = Post(
                id=PostId(uuid4()),
                author_id=author.id,
                text=text,
                created_at=utcnow(),
            )
            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                author=author.account_identifier.root,
            )
            return saved

    async def create_comment(self, post_id: PostId, author: Identity, text: str) -> Comment:
        """Comment on a post.

        Args:
            post_id: Post being commented on
            author: Commenting identity
            text: Comment body

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.create_comment",
            post_id=str(post_id),
            author=author.account_identifier.root,
        ):
            if not await self.post_repository.find_by_id(post_id):
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author.id,
                author_identifier=author.account_identifier,
                text=text,
                created_at=utcnow(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
            )
            return saved

    async def get_posts_by(self, author: Identity) -> list[Post]:
        return await self.post_repository.find_by_author(author.id)

    async def get_comments(self, post_id: PostId) -> list[Comment]:
        return await self.comment_repository.find_by_post(post_id)
