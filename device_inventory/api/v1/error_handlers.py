"""
Error Handlers
==============

Translate device errors and request validation failures into HTTP
responses. This is the only place where an ErrorKind becomes a status code.
"""
import logging
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from device_inventory.application.dto.device_dto import ErrorResponse
from device_inventory.domain.exceptions import DeviceError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.NOT_ALLOWED: status.HTTP_406_NOT_ACCEPTABLE,
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status code for an error kind."""
    return STATUS_BY_KIND[kind]


def _error_response(kind: ErrorKind, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_for(kind),
        content=ErrorResponse(kind=kind.value, detail=detail).model_dump(),
    )


async def device_error_handler(request: Request, exc: DeviceError) -> JSONResponse:
    """Map a DeviceError to its status code."""
    logger.info("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.kind, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed bodies, unknown states and malformed ids as INVALID_INPUT."""
    messages = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid')}"
        for error in exc.errors()
    ]
    detail = "; ".join(messages) or "Invalid request"
    logger.info("%s %s rejected: %s", request.method, request.url.path, detail)
    return _error_response(ErrorKind.INVALID_INPUT, detail)


def register_error_handlers(application: FastAPI) -> None:
    """Install the device error handlers on an application."""
    application.add_exception_handler(DeviceError, device_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
