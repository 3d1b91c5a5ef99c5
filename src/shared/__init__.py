"""
Shared Configuration

Responsibility:
    Cross-cutting concerns used across all layers.

Contains:
    - Settings: environment-based configuration (config.py)

Does NOT contain:
    - Business logic
    - Infrastructure implementations
"""

from src.shared.config import Settings, split_origins

__all__ = ["Settings", "split_origins"]
