"""
Device Controller
=================

FastAPI controller for device inventory endpoints.
Each handler awaits the service future without blocking the event loop.
"""
import asyncio
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from device_inventory.api.v1.dependencies import get_device_service
from device_inventory.application.dto.device_dto import (
    DeviceRequest,
    DeviceResponse,
    ErrorResponse,
)
from device_inventory.application.services.device_service import DeviceService
from device_inventory.domain.models.device import DeviceState

logger = logging.getLogger(__name__)
router = APIRouter(tags=["devices"])


@router.post(
    "",
    response_model=DeviceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new device",
    responses={400: {"model": ErrorResponse, "description": "Invalid state or malformed request"}},
)
async def create_device(
    request: DeviceRequest,
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    """Create a device. Id and creation time are assigned by the store."""
    logger.info("Received request to create device: %s", request)
    device = await asyncio.wrap_future(service.create_device(request.to_entity()))
    logger.info("Device created: %s", device.id)
    return DeviceResponse.from_entity(device)


@router.get(
    "",
    response_model=List[DeviceResponse],
    summary="Retrieve all devices",
    description="Fetches a list of all devices available in the system.",
    responses={404: {"model": ErrorResponse, "description": "No devices found"}},
)
async def get_all_devices(
    service: DeviceService = Depends(get_device_service),
) -> List[DeviceResponse]:
    """List every device."""
    logger.info("Retrieving all devices")
    devices = await asyncio.wrap_future(service.get_all_devices())
    return [DeviceResponse.from_entity(dev) for dev in devices]


@router.get(
    "/brand/{brand}",
    response_model=List[DeviceResponse],
    summary="Get devices by brand",
    responses={404: {"model": ErrorResponse, "description": "No devices found for the specified brand"}},
)
async def get_devices_by_brand(
    brand: str,
    service: DeviceService = Depends(get_device_service),
) -> List[DeviceResponse]:
    """List devices of a brand (exact match)."""
    logger.info("Retrieving all devices with brand: %s", brand)
    devices = await asyncio.wrap_future(service.get_devices_by_brand(brand))
    return [DeviceResponse.from_entity(dev) for dev in devices]


@router.get(
    "/state/{state}",
    response_model=List[DeviceResponse],
    summary="Get devices by state",
    responses={
        400: {"model": ErrorResponse, "description": "Unknown state"},
        404: {"model": ErrorResponse, "description": "No devices found for the specified state"},
    },
)
async def get_devices_by_state(
    state: DeviceState,
    service: DeviceService = Depends(get_device_service),
) -> List[DeviceResponse]:
    """List devices in a state."""
    logger.info("Retrieving all devices with state: %s", state.value)
    devices = await asyncio.wrap_future(service.get_devices_by_state(state))
    return [DeviceResponse.from_entity(dev) for dev in devices]


@router.get(
    "/{device_id}",
    response_model=DeviceResponse,
    summary="Get a device by ID",
    responses={404: {"model": ErrorResponse, "description": "Device not found"}},
)
async def get_device_by_id(
    device_id: UUID,
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    """Get a specific device by ID."""
    logger.info("Retrieving device with id: %s", device_id)
    device = await asyncio.wrap_future(service.get_device_by_id(str(device_id)))
    return DeviceResponse.from_entity(device)


@router.put(
    "/{device_id}",
    response_model=DeviceResponse,
    summary="Update a device",
    responses={
        404: {"model": ErrorResponse, "description": "Device not found"},
        406: {"model": ErrorResponse, "description": "Invalid update"},
    },
)
async def update_device(
    device_id: UUID,
    request: DeviceRequest,
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    """Replace name, brand and state of a device."""
    logger.info("Trying to update device with id: %s", device_id)
    device = await asyncio.wrap_future(service.update_device(str(device_id), request.to_entity()))
    return DeviceResponse.from_entity(device)


@router.delete(
    "/flush",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete all devices",
)
async def flush(
    service: DeviceService = Depends(get_device_service),
) -> Response:
    """Remove every device regardless of state."""
    logger.info("Flushing all devices")
    await asyncio.wrap_future(service.flush())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{device_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a device by ID",
    responses={
        404: {"model": ErrorResponse, "description": "Device not found"},
        406: {"model": ErrorResponse, "description": "Invalid delete"},
    },
)
async def delete_device(
    device_id: UUID,
    service: DeviceService = Depends(get_device_service),
) -> Response:
    """Delete a device that is not in use."""
    logger.info("Trying to delete device with id: %s", device_id)
    await asyncio.wrap_future(service.delete_device(str(device_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
