"""
In-Memory Device Repository
===========================

Process-local implementation of DeviceRepository backed by a dict.
Used for local development and tests; contents are lost on restart.
"""
import logging
import threading
import uuid
from dataclasses import replace
from typing import Dict, List, Optional

from device_inventory.domain.models.device import Device, DeviceState
from device_inventory.domain.repositories.device_repository import DeviceRepository
from device_inventory.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class InMemoryDeviceRepository(DeviceRepository):
    """
    Dict-backed DeviceRepository.

    The lock guards each individual call only. Multi-step sequences in the
    service (lookup then write) are not atomic.
    """

    def __init__(self):
        self._devices: Dict[str, Device] = {}
        self._lock = threading.Lock()

    def create(self, device: Device) -> Device:
        """Create a new device."""
        device.id = str(uuid.uuid4())
        device.creation_time = now()
        with self._lock:
            self._devices[device.id] = replace(device)
        logger.debug("Stored device %s", device.id)
        return device

    def save(self, device: Device) -> Device:
        """Overwrite an existing device."""
        with self._lock:
            self._devices[device.id] = replace(device)
        return device

    def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find a device by its ID."""
        with self._lock:
            stored = self._devices.get(device_id)
        return replace(stored) if stored else None

    def find_all(self) -> List[Device]:
        """Find every device."""
        with self._lock:
            return [replace(dev) for dev in self._devices.values()]

    def find_by_brand(self, brand: str) -> List[Device]:
        """Find all devices of a brand."""
        with self._lock:
            return [replace(dev) for dev in self._devices.values() if dev.brand == brand]

    def find_by_state(self, state: DeviceState) -> List[Device]:
        """Find all devices in a state."""
        with self._lock:
            return [replace(dev) for dev in self._devices.values() if dev.state == state]

    def delete(self, device_id: str) -> bool:
        """Delete a device."""
        with self._lock:
            return self._devices.pop(device_id, None) is not None

    def delete_all(self) -> int:
        """Delete every device."""
        with self._lock:
            count = len(self._devices)
            self._devices.clear()
        return count
