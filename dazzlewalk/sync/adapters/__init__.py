"""Blocking adapters for the threaded walker."""

from .filesystem import FileSystemAdapter

__all__ = [
    'FileSystemAdapter',
]
