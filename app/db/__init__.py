"""
Database module - MongoDB connection and request-scoped handle.
"""
from app.db.mongodb import connect_mongo, get_db, init_mongo_indexes, test_mongo_connection

__all__ = [
    "connect_mongo",
    "get_db",
    "init_mongo_indexes",
    "test_mongo_connection"
]
