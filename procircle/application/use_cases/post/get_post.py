# Local application imports
from ....domain.services.post_feed import PostFeed
from ...dto.post_dto import PostResponse
from .post_presenter import PostPresenter


class GetPostUseCase:
    """Use case for getting a post by ID"""

    def __init__(self, post_feed: PostFeed, presenter: PostPresenter) -> None:
        self.post_feed = post_feed
        self.presenter = presenter

    async def execute(self, post_id: str) -> PostResponse:
        post = await self.post_feed.get_by_id(post_id)
        return await self.presenter.present(post)
