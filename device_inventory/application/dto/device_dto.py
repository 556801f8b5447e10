"""
Device DTO
==========

Pydantic models for device API requests and responses.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from device_inventory.domain.models.device import Device, DeviceState


class DeviceRequest(BaseModel):
    """
    DTO for creating/updating a device.

    A missing state is let through so the service can reject it as
    INVALID_STATE; an unknown state fails validation here. Extra fields such
    as `id` or `creation_time` are ignored.
    """
    name: str = Field(..., description="Device name")
    brand: str = Field(..., description="Manufacturer tag")
    state: Optional[DeviceState] = Field(None, description="Lifecycle state")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Pixel 8",
                "brand": "Google",
                "state": "AVAILABLE",
            }
        }

    def to_entity(self) -> Device:
        return Device(name=self.name, brand=self.brand, state=self.state)


class DeviceResponse(BaseModel):
    """DTO for device data."""
    id: str
    name: str
    brand: str
    state: DeviceState
    creation_time: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "id": "0b6f3c52-5a1e-4f0e-9f4b-2f8f5d0c7e21",
                "name": "Pixel 8",
                "brand": "Google",
                "state": "AVAILABLE",
                "creation_time": "2026-01-12T09:11:50.840Z",
            }
        }

    @classmethod
    def from_entity(cls, device: Device) -> "DeviceResponse":
        return cls(
            id=device.id,
            name=device.name,
            brand=device.brand,
            state=device.state,
            creation_time=device.creation_time,
        )


class ErrorResponse(BaseModel):
    """DTO for failed requests."""
    kind: str = Field(..., description="Failure category")
    detail: str = Field(..., description="Human-readable message")
