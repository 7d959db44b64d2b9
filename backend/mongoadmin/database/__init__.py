"""
Database module - MongoDB driver interface and per-request connections.
"""
from mongoadmin.database.connections import get_driver, open_driver
from mongoadmin.database.driver import MongoDriver, MotorDriver

__all__ = [
    "get_driver",
    "open_driver",
    "MongoDriver",
    "MotorDriver",
]
