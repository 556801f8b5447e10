"""
Create Device Use Case
======================

Business use case for adding a device to the inventory.
"""
import logging

from device_inventory.domain.exceptions import InvalidStateError
from device_inventory.domain.models.device import Device, DeviceState
from device_inventory.domain.policies.lifecycle_policy import is_valid_state
from device_inventory.domain.repositories.device_repository import DeviceRepository

logger = logging.getLogger(__name__)


class CreateDeviceUseCase:
    """
    Use case for creating a device.

    The state must be one of the known states. Identifier and creation time
    supplied by the caller are ignored; the store assigns both.
    """

    def __init__(self, device_repository: DeviceRepository):
        """
        Initialize use case with repository.

        Args:
            device_repository: Repository for device persistence
        """
        self._repository = device_repository

    def execute(self, device: Device) -> Device:
        """
        Execute the create device use case.

        Args:
            device: Device to create

        Returns:
            Persisted device entity with generated id and creation time

        Raises:
            InvalidStateError: If the state is missing or unknown
        """
        if not is_valid_state(device.state):
            logger.error("Invalid state: %s", device.state)
            raise InvalidStateError("Invalid state")

        new_device = Device(
            name=device.name,
            brand=device.brand,
            state=DeviceState(device.state),
        )
        created = self._repository.create(new_device)
        logger.info("Device %s created in state %s", created.id, created.state.value)
        return created
