# Standard library imports
import logging
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    DeviceProvider,
)
from ..application.services.device_service import DeviceService

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Dispatcher and services (DeviceProvider) - depend on repositories
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        DeviceProvider.register(self)

    def shutdown(self) -> None:
        """Release the worker pool and the database connection."""
        if self.has(DeviceService):
            self.get(DeviceService).shutdown()
        if self.has("mongo_client"):
            self.get("mongo_client").close()
        logger.info("Container shut down")


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
    """Shut down and drop the global container, if one was built."""
    global _container
    if _container is not None:
        _container.shutdown()
        _container = None
