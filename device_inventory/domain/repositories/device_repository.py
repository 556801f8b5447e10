"""
Device Repository Interface
===========================

Abstract interface for device data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from device_inventory.domain.models.device import Device, DeviceState


class DeviceRepository(ABC):
    """
    Abstract repository for device persistence operations.

    This interface defines the contract for device data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def create(self, device: Device) -> Device:
        """
        Persist a new device.

        The store assigns `id` and `creation_time`; any values already set
        on the given device are overwritten.

        Args:
            device: Device entity to create

        Returns:
            Created device entity
        """
        pass

    @abstractmethod
    def save(self, device: Device) -> Device:
        """
        Overwrite the stored record with the same id.

        Args:
            device: Device entity carrying its id and creation time

        Returns:
            Persisted device entity
        """
        pass

    @abstractmethod
    def find_by_id(self, device_id: str) -> Optional[Device]:
        """
        Find a device by its ID.

        Args:
            device_id: Unique device identifier

        Returns:
            Device entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Device]:
        """
        Find every stored device.

        Returns:
            List of device entities
        """
        pass

    @abstractmethod
    def find_by_brand(self, brand: str) -> List[Device]:
        """
        Find all devices of a brand (exact, case-sensitive match).

        Args:
            brand: Manufacturer tag

        Returns:
            List of device entities
        """
        pass

    @abstractmethod
    def find_by_state(self, state: DeviceState) -> List[Device]:
        """
        Find all devices in a state.

        Args:
            state: Lifecycle state

        Returns:
            List of device entities
        """
        pass

    @abstractmethod
    def delete(self, device_id: str) -> bool:
        """
        Delete a device.

        Args:
            device_id: Unique device identifier

        Returns:
            True if device was found and deleted, False otherwise
        """
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """
        Delete every stored device.

        Returns:
            Number of deleted devices
        """
        pass
