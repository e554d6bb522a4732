"""Data access for cable entries."""

from .base import CableEntryRepository
from .memory import InMemoryCableEntryRepository, PROTECTED_FIELDS

__all__ = [
    "CableEntryRepository",
    "InMemoryCableEntryRepository",
    "PROTECTED_FIELDS",
]
