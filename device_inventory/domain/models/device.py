"""
Device Model
============

Domain model representing a device in the inventory.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass


class DeviceState(str, Enum):
    """Lifecycle state of a device. Persisted as its name."""
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    INACTIVE = "INACTIVE"

    @classmethod
    def names(cls) -> List[str]:
        """Names of all states, in declaration order."""
        return [state.name for state in cls]


@dataclass
class Device:
    """
    Device domain model.

    `id` and `creation_time` are owned by the store: they are empty until the
    device is first persisted and are never changed afterwards.
    """
    name: str
    brand: str
    state: Optional[DeviceState]
    id: Optional[str] = None
    creation_time: Optional[datetime] = None

    def is_in_use(self) -> bool:
        """Check if device is in use."""
        return self.state == DeviceState.IN_USE
