# Local application imports
from ....domain.services.post_feed import PostFeed
from ...dto.post_dto import PostCreateRequest, PostEnvelope
from .post_presenter import PostPresenter


class CreatePostUseCase:
    """Use case for publishing a new post as the authenticated user"""

    def __init__(self, post_feed: PostFeed, presenter: PostPresenter) -> None:
        self.post_feed = post_feed
        self.presenter = presenter

    async def execute(self, request: PostCreateRequest, author_id: str) -> PostEnvelope:
        """
        Raises:
            InvalidInputError: If content is empty after trimming
        """
        post = await self.post_feed.create_post(author_id, request.content)
        return PostEnvelope(
            message="Post created successfully",
            post=await self.presenter.present(post),
        )
