"""
MongoDB Device Repository
==========================

Concrete implementation of DeviceRepository using MongoDB.
"""
import logging
import uuid
from typing import List, Optional
from pymongo import ASCENDING
from pymongo.collection import Collection

from device_inventory.domain.models.device import Device, DeviceState
from device_inventory.domain.repositories.device_repository import DeviceRepository
from device_inventory.domain.constants.device_fields import DeviceFields
from device_inventory.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class MongoDeviceRepository(DeviceRepository):
    """
    MongoDB implementation of DeviceRepository.

    Handles all device persistence operations using MongoDB.
    """

    def __init__(self, collection: Collection):
        """
        Initialize repository with a MongoDB collection.

        Args:
            collection: Collection holding one document per device
        """
        self._collection = collection

    def ensure_indexes(self) -> None:
        """Create the primary key index and the secondary lookup indexes."""
        self._collection.create_index([(DeviceFields.ID, ASCENDING)], unique=True)
        self._collection.create_index([(DeviceFields.BRAND, ASCENDING)])
        self._collection.create_index([(DeviceFields.STATE, ASCENDING)])

    def _to_entity(self, doc: dict) -> Device:
        """Convert MongoDB document to Device entity."""
        return Device(
            id=doc[DeviceFields.ID],
            name=doc[DeviceFields.NAME],
            brand=doc[DeviceFields.BRAND],
            state=DeviceState(doc[DeviceFields.STATE]),
            creation_time=doc.get(DeviceFields.CREATION_TIME),
        )

    def _to_document(self, device: Device) -> dict:
        """Convert Device entity to MongoDB document."""
        return {
            DeviceFields.ID: device.id,
            DeviceFields.NAME: device.name,
            DeviceFields.BRAND: device.brand,
            DeviceFields.STATE: device.state.value,
            DeviceFields.CREATION_TIME: device.creation_time,
        }

    def create(self, device: Device) -> Device:
        """Create a new device."""
        created_at = now()
        # BSON dates carry millisecond precision
        created_at = created_at.replace(microsecond=created_at.microsecond // 1000 * 1000)

        device.id = str(uuid.uuid4())
        device.creation_time = created_at

        self._collection.insert_one(self._to_document(device))
        logger.debug("Inserted device %s", device.id)
        return device

    def save(self, device: Device) -> Device:
        """Overwrite an existing device."""
        self._collection.replace_one(
            {DeviceFields.ID: device.id},
            self._to_document(device),
            upsert=True,
        )
        return device

    def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find a device by its ID."""
        doc = self._collection.find_one({DeviceFields.ID: device_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_all(self) -> List[Device]:
        """Find every device."""
        docs = self._collection.find({}).sort(DeviceFields.CREATION_TIME, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def find_by_brand(self, brand: str) -> List[Device]:
        """Find all devices of a brand."""
        docs = self._collection.find({DeviceFields.BRAND: brand}).sort(DeviceFields.CREATION_TIME, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def find_by_state(self, state: DeviceState) -> List[Device]:
        """Find all devices in a state."""
        docs = self._collection.find({DeviceFields.STATE: state.value}).sort(DeviceFields.CREATION_TIME, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def delete(self, device_id: str) -> bool:
        """Delete a device."""
        result = self._collection.delete_one({DeviceFields.ID: device_id})
        return result.deleted_count > 0

    def delete_all(self) -> int:
        """Delete every device."""
        result = self._collection.delete_many({})
        return result.deleted_count
