# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    ServiceProvider,
    AuthProvider,
    UserProvider,
    PostProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Domain services (ServiceProvider) - depend on repositories
    4. Use cases (AuthProvider, UserProvider, PostProvider) - depend on services
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        ServiceProvider.register(self)
        AuthProvider.register(self)
        UserProvider.register(self)
        PostProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next get_container() rebuilds it"""
    global _container
    _container = None
