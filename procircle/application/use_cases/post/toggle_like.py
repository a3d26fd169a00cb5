# Local application imports
from ....domain.services.post_feed import PostFeed
from ...dto.post_dto import LikeResponse
from .post_presenter import PostPresenter


class ToggleLikeUseCase:
    """Use case for liking a post, or unliking it if already liked"""

    def __init__(self, post_feed: PostFeed, presenter: PostPresenter) -> None:
        self.post_feed = post_feed
        self.presenter = presenter

    async def execute(self, post_id: str, requester_id: str) -> LikeResponse:
        post, liked = await self.post_feed.toggle_like(post_id, requester_id)
        return LikeResponse(
            message="Post liked" if liked else "Post unliked",
            post=await self.presenter.present(post),
            liked=liked,
        )
