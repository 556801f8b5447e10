"""Constants for Device model field names"""


class DeviceFields:
    """Field name constants for Device model"""
    ID = "id"
    NAME = "name"
    BRAND = "brand"
    STATE = "state"
    CREATION_TIME = "creation_time"
