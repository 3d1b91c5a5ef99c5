"""
Persistence Infrastructure Module

Data persistence implementations (MongoDB connection, repositories).

Exports:
    From mongo:
        - MongoConnection

    From repositories:
        - MongoSubmissionRepository
"""

from .mongo import MongoConnection
from .repositories import MongoSubmissionRepository

__all__ = [
    "MongoConnection",
    "MongoSubmissionRepository",
]
