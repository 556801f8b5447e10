"""
Delete Device Use Case
======================

Business use case for removing a device from the inventory.
"""
import logging

from device_inventory.domain.exceptions import DeviceNotAllowedError, DeviceNotFoundError
from device_inventory.domain.policies.lifecycle_policy import can_delete
from device_inventory.domain.repositories.device_repository import DeviceRepository

logger = logging.getLogger(__name__)


class DeleteDeviceUseCase:
    """Use case for deleting a device that is not in use."""

    def __init__(self, device_repository: DeviceRepository):
        self._repository = device_repository

    def execute(self, device_id: str) -> None:
        """
        Execute the delete device use case.

        Args:
            device_id: Identifier of the device to delete

        Raises:
            DeviceNotFoundError: If no device has this id
            DeviceNotAllowedError: If the device is in use
        """
        existing = self._repository.find_by_id(device_id)
        if existing is None:
            logger.error("Device not found with id: %s", device_id)
            raise DeviceNotFoundError("Device not found")

        decision = can_delete(existing)
        if not decision.allowed:
            logger.error("Device %s is in use and cannot be deleted", device_id)
            raise DeviceNotAllowedError(decision.reason)

        self._repository.delete(device_id)
        logger.info("Device %s deleted", device_id)
