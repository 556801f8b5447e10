"""
Device Inventory
================

Inventory service for physical devices. Devices move between AVAILABLE,
IN_USE and INACTIVE; devices in use keep their name and brand and cannot be
deleted.
"""
__version__ = "1.0.0"
