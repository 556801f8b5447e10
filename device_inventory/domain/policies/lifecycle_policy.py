"""
Device Lifecycle Policy
=======================

Pure decision rules gating mutation of a device based on its current
persisted state. No I/O and no side effects.

Rules:
- A device may only be created with one of the known states.
- A device IN_USE keeps its name and brand; its state may still change.
- A device IN_USE cannot be deleted.

Any state is reachable from any other through an update. Deletion is only
permitted from AVAILABLE or INACTIVE.
"""
from dataclasses import dataclass
from typing import Any, Optional

from device_inventory.domain.models.device import Device, DeviceState

UPDATE_IN_USE_REASON = f"Cannot update name or brand of a device {DeviceState.IN_USE.name}"
DELETE_IN_USE_REASON = "In-use devices cannot be deleted"


@dataclass(frozen=True)
class PolicyDecision:
    """Outcome of a policy check."""
    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "PolicyDecision":
        return cls(allowed=True)

    @classmethod
    def reject(cls, reason: str) -> "PolicyDecision":
        return cls(allowed=False, reason=reason)

    def __bool__(self) -> bool:
        return self.allowed


def is_valid_state(candidate: Any) -> bool:
    """
    Check whether a candidate is one of the known device states.

    Enum members are accepted as-is; plain strings must match a state name
    exactly. None and anything else are rejected.
    """
    if isinstance(candidate, DeviceState):
        return True
    if isinstance(candidate, str):
        return candidate in DeviceState.names()
    return False


def can_update(existing: Device, proposed: Device) -> PolicyDecision:
    """
    Decide whether `existing` may be replaced by `proposed`.

    Only name and brand are frozen while the device is in use.
    """
    if existing.is_in_use() and (
        proposed.name != existing.name or proposed.brand != existing.brand
    ):
        return PolicyDecision.reject(UPDATE_IN_USE_REASON)
    return PolicyDecision.allow()


def can_delete(existing: Device) -> PolicyDecision:
    """Decide whether `existing` may be deleted."""
    if existing.is_in_use():
        return PolicyDecision.reject(DELETE_IN_USE_REASON)
    return PolicyDecision.allow()
