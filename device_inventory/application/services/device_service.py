"""
Device Service
==============

Application service that coordinates device-related operations.
This service orchestrates the device use cases and runs every operation on
the injected task dispatcher.
"""
import logging
from concurrent.futures import Future
from typing import List

from device_inventory.application.task_dispatcher import TaskDispatcher
from device_inventory.application.use_cases.device.create_device import CreateDeviceUseCase
from device_inventory.application.use_cases.device.delete_device import DeleteDeviceUseCase
from device_inventory.application.use_cases.device.update_device import UpdateDeviceUseCase
from device_inventory.domain.exceptions import DeviceNotFoundError
from device_inventory.domain.models.device import Device, DeviceState
from device_inventory.domain.repositories.device_repository import DeviceRepository

logger = logging.getLogger(__name__)


class DeviceService:
    """
    Application service for device operations.

    Every public method returns a Future; failures surface as DeviceError
    subclasses raised from `Future.result()`.

    Queries that match no device fail with DeviceNotFoundError instead of
    returning an empty list. Callers and the HTTP layer rely on this.
    """

    def __init__(self, device_repository: DeviceRepository, dispatcher: TaskDispatcher):
        """
        Initialize service with repository and worker pool.

        Args:
            device_repository: Repository for device persistence
            dispatcher: Worker pool the operations run on
        """
        self._repository = device_repository
        self._dispatcher = dispatcher
        self._create_use_case = CreateDeviceUseCase(device_repository)
        self._update_use_case = UpdateDeviceUseCase(device_repository)
        self._delete_use_case = DeleteDeviceUseCase(device_repository)

    def create_device(self, device: Device) -> "Future[Device]":
        """
        Create a device.

        Args:
            device: Device to create; its id and creation time are ignored

        Returns:
            Future resolving to the persisted device
        """
        return self._dispatcher.submit(self._create_use_case.execute, device)

    def get_all_devices(self) -> "Future[List[Device]]":
        """Future resolving to every device; fails with NOT_FOUND when the store is empty."""
        return self._dispatcher.submit(self._get_all_devices)

    def get_device_by_id(self, device_id: str) -> "Future[Device]":
        """Future resolving to the device with this id."""
        return self._dispatcher.submit(self._get_device_by_id, device_id)

    def get_devices_by_brand(self, brand: str) -> "Future[List[Device]]":
        """Future resolving to all devices of a brand."""
        return self._dispatcher.submit(self._get_devices_by_brand, brand)

    def get_devices_by_state(self, state: DeviceState) -> "Future[List[Device]]":
        """Future resolving to all devices in a state."""
        return self._dispatcher.submit(self._get_devices_by_state, state)

    def update_device(self, device_id: str, updated_device: Device) -> "Future[Device]":
        """
        Replace name, brand and state of a device.

        Args:
            device_id: Identifier of the device to update
            updated_device: New values; id and creation time are taken from the stored device

        Returns:
            Future resolving to the persisted device
        """
        return self._dispatcher.submit(self._update_use_case.execute, device_id, updated_device)

    def delete_device(self, device_id: str) -> "Future[None]":
        """Future resolving once the device is deleted."""
        return self._dispatcher.submit(self._delete_use_case.execute, device_id)

    def flush(self) -> "Future[int]":
        """Future resolving to the number of devices removed. No policy applies."""
        return self._dispatcher.submit(self._flush)

    def shutdown(self, wait: bool = True) -> None:
        """Stop the worker pool owned by this service."""
        self._dispatcher.shutdown(wait=wait)

    def _get_all_devices(self) -> List[Device]:
        devices = self._repository.find_all()
        if not devices:
            logger.warning("No devices found")
            raise DeviceNotFoundError("No devices found")
        return devices

    def _get_device_by_id(self, device_id: str) -> Device:
        device = self._repository.find_by_id(device_id)
        if device is None:
            logger.error("Device with id %s not found", device_id)
            raise DeviceNotFoundError("Device not found")
        return device

    def _get_devices_by_brand(self, brand: str) -> List[Device]:
        logger.info("Getting devices by brand %s", brand)
        devices = self._repository.find_by_brand(brand)
        if not devices:
            logger.warning("No devices found for brand %s", brand)
            raise DeviceNotFoundError(f"No devices found for brand {brand}")
        return devices

    def _get_devices_by_state(self, state: DeviceState) -> List[Device]:
        logger.info("Getting devices by state %s", state.value)
        devices = self._repository.find_by_state(state)
        if not devices:
            logger.warning("No devices found for state %s", state.value)
            raise DeviceNotFoundError(f"No devices found for state {state.value}")
        return devices

    def _flush(self) -> int:
        logger.info("Flushing all devices")
        return self._repository.delete_all()
