from .user_controller import router as user_router
from .post_controller import router as post_router


__all__ = ["user_router", "post_router"]
