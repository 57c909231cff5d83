"""
Database models for the link shortener.

A single table holds every link; click counts live on the same row.
"""

from .link import Link

__all__ = ["Link"]
