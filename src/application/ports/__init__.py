"""
Application Layer Ports (Interfaces)

Contains Protocol definitions for dependency inversion.
Infrastructure Layer implements these protocols.
"""

from src.application.ports.attachment_storage import AttachmentStorageProtocol

__all__ = ["AttachmentStorageProtocol"]
