# Local application imports
from ....domain.services.post_feed import PostFeed
from ...dto.post_dto import CommentCreateRequest, PostEnvelope
from .post_presenter import PostPresenter


class AddCommentUseCase:
    """Use case for commenting on a post"""

    def __init__(self, post_feed: PostFeed, presenter: PostPresenter) -> None:
        self.post_feed = post_feed
        self.presenter = presenter

    async def execute(self, post_id: str, request: CommentCreateRequest, requester_id: str) -> PostEnvelope:
        """
        Raises:
            InvalidInputError: If text is empty after trimming
            NotFoundError: If the post does not exist
        """
        post = await self.post_feed.add_comment(post_id, requester_id, request.text)
        return PostEnvelope(
            message="Comment added successfully",
            post=await self.presenter.present(post),
        )
