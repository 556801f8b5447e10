"""Tests for the device service."""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from device_inventory.application.services.device_service import DeviceService
from device_inventory.domain.exceptions import (
    DeviceError,
    DeviceNotAllowedError,
    DeviceNotFoundError,
    ErrorKind,
    InvalidStateError,
)
from device_inventory.domain.models.device import Device, DeviceState
from device_inventory.domain.repositories.device_repository import DeviceRepository


@pytest.fixture
def mock_repository():
    return Mock(spec=DeviceRepository)


@pytest.fixture
def mocked_service(mock_repository, dispatcher):
    return DeviceService(device_repository=mock_repository, dispatcher=dispatcher)


@pytest.fixture
def stored_device():
    return Device(
        id="0b6f3c52-5a1e-4f0e-9f4b-2f8f5d0c7e21",
        name="Device1",
        brand="BrandA",
        state=DeviceState.AVAILABLE,
        creation_time=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


# ---------------------------------------------------------------------------
# Against a mocked repository
# ---------------------------------------------------------------------------

def test_create_with_valid_state_saves_device(mocked_service, mock_repository, stored_device):
    mock_repository.create.return_value = stored_device

    result = mocked_service.create_device(Device(name="Device1", brand="BrandA", state=DeviceState.AVAILABLE))

    assert result.result() == stored_device
    mock_repository.create.assert_called_once()


def test_create_without_state_never_touches_store(mocked_service, mock_repository):
    future = mocked_service.create_device(Device(name="Device1", brand="BrandA", state=None))

    with pytest.raises(InvalidStateError) as exc_info:
        future.result()

    assert exc_info.value.message == "Invalid state"
    assert exc_info.value.kind == ErrorKind.INVALID_STATE
    mock_repository.create.assert_not_called()


def test_get_all_on_empty_store_is_not_found(mocked_service, mock_repository):
    mock_repository.find_all.return_value = []

    with pytest.raises(DeviceNotFoundError, match="No devices found"):
        mocked_service.get_all_devices().result()
    mock_repository.find_all.assert_called_once_with()


def test_get_by_unknown_id_is_not_found(mocked_service, mock_repository):
    mock_repository.find_by_id.return_value = None

    with pytest.raises(DeviceNotFoundError, match="Device not found"):
        mocked_service.get_device_by_id("missing").result()
    mock_repository.find_by_id.assert_called_once_with("missing")


def test_update_unknown_id_never_saves(mocked_service, mock_repository):
    mock_repository.find_by_id.return_value = None
    proposed = Device(name="UpdatedDevice", brand="UpdatedBrand", state=DeviceState.AVAILABLE)

    with pytest.raises(DeviceNotFoundError, match="Device not found"):
        mocked_service.update_device("missing", proposed).result()
    mock_repository.save.assert_not_called()


def test_update_saves_replacement_with_existing_identity(mocked_service, mock_repository, stored_device):
    mock_repository.find_by_id.return_value = stored_device
    mock_repository.save.side_effect = lambda device: device
    proposed = Device(name="UpdatedDevice", brand="UpdatedBrand", state=DeviceState.INACTIVE)

    result = mocked_service.update_device(stored_device.id, proposed).result()

    saved = mock_repository.save.call_args.args[0]
    assert saved is result
    assert saved.id == stored_device.id
    assert saved.creation_time == stored_device.creation_time
    assert (saved.name, saved.brand, saved.state) == ("UpdatedDevice", "UpdatedBrand", DeviceState.INACTIVE)


def test_brand_without_matches_is_not_found(mocked_service, mock_repository):
    mock_repository.find_by_brand.return_value = []

    with pytest.raises(DeviceNotFoundError, match="No devices found for brand BrandA"):
        mocked_service.get_devices_by_brand("BrandA").result()


def test_state_without_matches_is_not_found(mocked_service, mock_repository):
    mock_repository.find_by_state.return_value = []

    with pytest.raises(DeviceNotFoundError, match="No devices found for state AVAILABLE"):
        mocked_service.get_devices_by_state(DeviceState.AVAILABLE).result()
    mock_repository.find_by_state.assert_called_once_with(DeviceState.AVAILABLE)


def test_delete_existing_device(mocked_service, mock_repository, stored_device):
    mock_repository.find_by_id.return_value = stored_device

    assert mocked_service.delete_device(stored_device.id).result() is None
    mock_repository.delete.assert_called_once_with(stored_device.id)


def test_delete_unknown_id_never_deletes(mocked_service, mock_repository):
    mock_repository.find_by_id.return_value = None

    with pytest.raises(DeviceNotFoundError):
        mocked_service.delete_device("missing").result()
    mock_repository.delete.assert_not_called()


def test_delete_in_use_device_never_deletes(mocked_service, mock_repository, stored_device):
    stored_device.state = DeviceState.IN_USE
    mock_repository.find_by_id.return_value = stored_device

    with pytest.raises(DeviceNotAllowedError, match="In-use devices cannot be deleted"):
        mocked_service.delete_device(stored_device.id).result()
    mock_repository.delete.assert_not_called()


def test_store_failures_propagate(mocked_service, mock_repository):
    mock_repository.find_all.side_effect = RuntimeError("connection lost")

    with pytest.raises(RuntimeError, match="connection lost"):
        mocked_service.get_all_devices().result()


# ---------------------------------------------------------------------------
# Against the in-memory store
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("state", list(DeviceState))
def test_create_assigns_id_and_creation_time(service, state):
    before = datetime.now(timezone.utc)
    supplied_time = before - timedelta(days=30)

    created = service.create_device(
        Device(id="caller-id", name="X", brand="B", state=state, creation_time=supplied_time)
    ).result()

    assert created.id and created.id != "caller-id"
    assert created.creation_time >= before
    assert created.state == state


def test_create_accepts_state_name(service):
    created = service.create_device(Device(name="X", brand="B", state="IN_USE")).result()

    assert created.state is DeviceState.IN_USE


@pytest.mark.parametrize("state", [None, "BROKEN"])
def test_create_rejects_unknown_state(service, state):
    with pytest.raises(InvalidStateError):
        service.create_device(Device(name="X", brand="B", state=state)).result()


def test_in_use_device_rules(service):
    created = service.create_device(Device(name="X", brand="B", state=DeviceState.IN_USE)).result()

    with pytest.raises(DeviceNotAllowedError) as exc_info:
        service.update_device(created.id, Device(name="Y", brand="B", state=DeviceState.IN_USE)).result()
    assert exc_info.value.kind == ErrorKind.NOT_ALLOWED

    with pytest.raises(DeviceNotAllowedError):
        service.update_device(created.id, Device(name="X", brand="C", state=DeviceState.IN_USE)).result()

    with pytest.raises(DeviceNotAllowedError):
        service.delete_device(created.id).result()

    updated = service.update_device(created.id, Device(name="X", brand="B", state=DeviceState.INACTIVE)).result()
    assert updated.state == DeviceState.INACTIVE
    assert service.get_device_by_id(created.id).result().name == "X"


@pytest.mark.parametrize("current", [DeviceState.AVAILABLE, DeviceState.INACTIVE])
def test_idle_device_can_change_and_be_deleted(service, current):
    created = service.create_device(Device(name="X", brand="B", state=current)).result()

    updated = service.update_device(created.id, Device(name="Y", brand="C", state=current)).result()
    assert (updated.name, updated.brand) == ("Y", "C")

    service.delete_device(created.id).result()
    with pytest.raises(DeviceNotFoundError):
        service.get_device_by_id(created.id).result()


def test_update_preserves_identity_regardless_of_request(service):
    created = service.create_device(Device(name="X", brand="B", state=DeviceState.AVAILABLE)).result()
    proposed = Device(
        id="someone-else",
        name="Y",
        brand="B",
        state=DeviceState.AVAILABLE,
        creation_time=datetime(2000, 1, 1, tzinfo=timezone.utc),
    )

    updated = service.update_device(created.id, proposed).result()
    fetched = service.get_device_by_id(created.id).result()

    assert updated.id == fetched.id == created.id
    assert updated.creation_time == fetched.creation_time == created.creation_time


def test_update_rejects_missing_state(service):
    created = service.create_device(Device(name="X", brand="B", state=DeviceState.AVAILABLE)).result()

    with pytest.raises(InvalidStateError):
        service.update_device(created.id, Device(name="X", brand="B", state=None)).result()


def test_filters(service):
    service.create_device(Device(name="A", brand="Acme", state=DeviceState.AVAILABLE)).result()
    service.create_device(Device(name="B", brand="Acme", state=DeviceState.IN_USE)).result()
    service.create_device(Device(name="C", brand="acme", state=DeviceState.IN_USE)).result()

    assert {d.name for d in service.get_devices_by_brand("Acme").result()} == {"A", "B"}
    assert {d.name for d in service.get_devices_by_state(DeviceState.IN_USE).result()} == {"B", "C"}
    assert len(service.get_all_devices().result()) == 3
    with pytest.raises(DeviceNotFoundError):
        service.get_devices_by_state(DeviceState.INACTIVE).result()


def test_flush_then_list_all_is_not_found(service):
    service.create_device(Device(name="A", brand="Acme", state=DeviceState.IN_USE)).result()

    assert service.flush().result() == 1
    with pytest.raises(DeviceNotFoundError):
        service.get_all_devices().result()
    assert service.flush().result() == 0


def test_lifecycle_scenario(service):
    created = service.create_device(Device(name="X", brand="B", state=DeviceState.AVAILABLE)).result()
    assert created.id

    service.update_device(created.id, Device(name="Y", brand="B", state=DeviceState.IN_USE)).result()

    with pytest.raises(DeviceNotAllowedError):
        service.update_device(created.id, Device(name="Z", brand="B", state=DeviceState.IN_USE)).result()
    with pytest.raises(DeviceNotAllowedError):
        service.delete_device(created.id).result()

    service.update_device(created.id, Device(name="Y", brand="B", state=DeviceState.AVAILABLE)).result()
    service.delete_device(created.id).result()

    with pytest.raises(DeviceError) as exc_info:
        service.get_device_by_id(created.id).result()
    assert exc_info.value.kind == ErrorKind.NOT_FOUND


def test_shutdown_stops_dispatcher(service, dispatcher):
    service.shutdown()

    assert dispatcher.closed
    with pytest.raises(RuntimeError):
        service.get_all_devices()
