# Local application imports
from ....domain.services.post_feed import PostFeed
from ...dto.post_dto import PostEnvelope, PostUpdateRequest
from .post_presenter import PostPresenter


class UpdatePostUseCase:
    """Use case for editing the content of one's own post"""

    def __init__(self, post_feed: PostFeed, presenter: PostPresenter) -> None:
        self.post_feed = post_feed
        self.presenter = presenter

    async def execute(self, post_id: str, request: PostUpdateRequest, requester_id: str) -> PostEnvelope:
        """
        Raises:
            NotFoundError: If the post does not exist
            UnauthorizedError: If requester is not the author
            InvalidInputError: If content is empty after trimming
        """
        post = await self.post_feed.update_content(post_id, requester_id, request.content)
        return PostEnvelope(
            message="Post updated successfully",
            post=await self.presenter.present(post),
        )
