# Local application imports
from ....domain.services.post_feed import PostFeed
from ...dto.base import MessageResponse


class DeletePostUseCase:
    """Use case for deleting one's own post"""

    def __init__(self, post_feed: PostFeed) -> None:
        self.post_feed = post_feed

    async def execute(self, post_id: str, requester_id: str) -> MessageResponse:
        await self.post_feed.delete_post(post_id, requester_id)
        return MessageResponse(message="Post deleted successfully")
