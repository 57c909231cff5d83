"""
Storage module for the link shortener.
"""

from .exceptions import StorageError, DuplicateLinkError
from .link_store import LinkStore

__all__ = [
    "StorageError",
    "DuplicateLinkError",
    "LinkStore",
]
