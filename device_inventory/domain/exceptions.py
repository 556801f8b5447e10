"""
Device Errors
=============

Typed failures raised by the device service. Each error carries an
ErrorKind; translating kinds into transport status codes is left to the
API layer.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure categories surfaced to callers."""
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_STATE = "INVALID_STATE"
    NOT_FOUND = "NOT_FOUND"
    NOT_ALLOWED = "NOT_ALLOWED"


class DeviceError(Exception):
    """Base error for device operations."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, message={self.message!r})"


class InvalidStateError(DeviceError):
    """Device state is missing or not one of the known states."""
    kind = ErrorKind.INVALID_STATE


class DeviceNotFoundError(DeviceError):
    """No device matches the requested id or filter."""
    kind = ErrorKind.NOT_FOUND


class DeviceNotAllowedError(DeviceError):
    """The lifecycle policy rejected the requested mutation."""
    kind = ErrorKind.NOT_ALLOWED
