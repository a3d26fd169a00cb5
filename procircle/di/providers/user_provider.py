from typing import TYPE_CHECKING
from ...domain.services.user_directory import UserDirectory
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_profile import UpdateProfileUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User profile use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(user_directory=container.get(UserDirectory)),
        )

        container.register_factory(
            UpdateProfileUseCase,
            lambda: UpdateProfileUseCase(user_directory=container.get(UserDirectory)),
        )
