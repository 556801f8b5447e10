from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.device_repository import DeviceRepository
from ...infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository
from .database_provider import MONGO_BACKEND

if TYPE_CHECKING:
    from ..base_container import BaseContainer

MEMORY_BACKEND = "memory"


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the device repository for the configured backend.

        Raises:
            ValueError: If STORE_BACKEND names an unknown backend
        """
        settings = get_settings()

        if settings.store_backend == MONGO_BACKEND:
            mongo_client = container.get("mongo_client")
            repository = MongoDeviceRepository(
                mongo_client.get_collection(settings.devices_collection)
            )
            repository.ensure_indexes()
        elif settings.store_backend == MEMORY_BACKEND:
            repository = InMemoryDeviceRepository()
        else:
            raise ValueError(
                f"Unknown STORE_BACKEND '{settings.store_backend}', "
                f"expected '{MONGO_BACKEND}' or '{MEMORY_BACKEND}'"
            )

        # Domain interface -> Infrastructure implementation
        container.register_singleton(DeviceRepository, repository)
