# Standard library imports
from typing import Optional

# Local application imports
from ....domain.services.post_feed import PostFeed
from ...dto.post_dto import PostListResponse
from .post_presenter import PostPresenter


class ListPostsUseCase:
    """Use case for paging through the home feed or one user's posts"""

    def __init__(self, post_feed: PostFeed, presenter: PostPresenter) -> None:
        self.post_feed = post_feed
        self.presenter = presenter

    async def execute(
        self,
        page: int,
        page_size: int,
        author_id: Optional[str] = None,
    ) -> PostListResponse:
        """
        Args:
            page: 1-indexed page number
            page_size: Posts per page
            author_id: Restrict to one author's posts when set

        Raises:
            InvalidInputError: If page or page_size is below 1
        """
        if author_id is None:
            feed_page = await self.post_feed.list_feed(page, page_size)
        else:
            feed_page = await self.post_feed.list_by_author(author_id, page, page_size)

        return PostListResponse(
            posts=await self.presenter.present_many(feed_page.items),
            current_page=feed_page.page,
            total_pages=feed_page.total_pages,
            total_posts=feed_page.total,
        )
