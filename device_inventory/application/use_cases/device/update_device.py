"""
Update Device Use Case
======================

Business use case for replacing a device's name, brand and state.
"""
import logging

from device_inventory.domain.exceptions import (
    DeviceNotAllowedError,
    DeviceNotFoundError,
    InvalidStateError,
)
from device_inventory.domain.models.device import Device, DeviceState
from device_inventory.domain.policies.lifecycle_policy import can_update, is_valid_state
from device_inventory.domain.repositories.device_repository import DeviceRepository

logger = logging.getLogger(__name__)


class UpdateDeviceUseCase:
    """
    Use case for updating a device.

    The lookup and the write are two separate store calls. A concurrent
    delete or update of the same id between them is not detected.
    """

    def __init__(self, device_repository: DeviceRepository):
        self._repository = device_repository

    def execute(self, device_id: str, proposed: Device) -> Device:
        """
        Execute the update device use case.

        Args:
            device_id: Identifier of the device to update
            proposed: New name, brand and state; its id and creation time are ignored

        Returns:
            Persisted device entity

        Raises:
            DeviceNotFoundError: If no device has this id
            InvalidStateError: If the proposed state is missing or unknown
            DeviceNotAllowedError: If the lifecycle policy rejects the change
        """
        existing = self._repository.find_by_id(device_id)
        if existing is None:
            logger.error("Device not found with id: %s", device_id)
            raise DeviceNotFoundError("Device not found")

        if not is_valid_state(proposed.state):
            logger.error("Invalid state for device %s: %s", device_id, proposed.state)
            raise InvalidStateError("Invalid state")

        decision = can_update(existing, proposed)
        if not decision.allowed:
            logger.error("Device %s is in use and cannot be updated", device_id)
            raise DeviceNotAllowedError(decision.reason)

        replacement = Device(
            id=device_id,
            name=proposed.name,
            brand=proposed.brand,
            state=DeviceState(proposed.state),
            creation_time=existing.creation_time,
        )
        saved = self._repository.save(replacement)
        logger.info("Device %s updated, state %s", device_id, saved.state.value)
        return saved
