"""
Dependency Container
====================

FastAPI dependency functions backed by the DI container.
"""
from device_inventory.application.services.device_service import DeviceService
from device_inventory.di.container import get_container


def get_device_service() -> DeviceService:
    """
    Get device service instance (singleton).

    Returns:
        DeviceService instance
    """
    container = get_container()
    return container.get(DeviceService)
