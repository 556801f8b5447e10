from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.device_repository import DeviceRepository
from ...application.services.device_service import DeviceService
from ...application.task_dispatcher import TaskDispatcher

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceProvider:
    """Device service provider - registers device-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the worker pool and the device service.
        The service owns the pool and shuts it down with itself.
        """
        settings = get_settings()
        dispatcher = TaskDispatcher(max_workers=settings.worker_pool_size)
        container.register_singleton(TaskDispatcher, dispatcher)

        container.register_singleton(
            DeviceService,
            DeviceService(
                device_repository=container.get(DeviceRepository),
                dispatcher=dispatcher,
            )
        )
