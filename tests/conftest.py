import pytest
from fastapi.testclient import TestClient

from device_inventory.application.services.device_service import DeviceService
from device_inventory.application.task_dispatcher import TaskDispatcher
from device_inventory.core.config import reset_settings
from device_inventory.di.container import reset_container
from device_inventory.infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository
from device_inventory.main import create_application


@pytest.fixture(autouse=True)
def _memory_settings(monkeypatch):
    """Run every test against the in-memory store with fresh settings."""
    monkeypatch.setenv("STORE_BACKEND", "memory")
    monkeypatch.setenv("TIMEZONE", "UTC")
    monkeypatch.setenv("WORKER_POOL_SIZE", "4")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("API_PREFIX", raising=False)
    reset_settings()
    yield
    reset_container()
    reset_settings()


@pytest.fixture
def repository():
    return InMemoryDeviceRepository()


@pytest.fixture
def dispatcher():
    pool = TaskDispatcher(max_workers=2)
    yield pool
    pool.shutdown()


@pytest.fixture
def service(repository, dispatcher):
    return DeviceService(device_repository=repository, dispatcher=dispatcher)


@pytest.fixture
def client():
    return TestClient(create_application())
