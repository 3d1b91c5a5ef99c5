"""
MongoDB Infrastructure Module

Exports:
    - MongoConnection: Process-wide motor client with PING health check
"""

from .connection import MongoConnection

__all__ = ["MongoConnection"]
