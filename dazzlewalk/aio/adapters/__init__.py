"""Async adapters for walking.

This module contains adapters that bridge a concrete storage to the
generic async walk interface.
"""

from .filesystem import AsyncFileSystemAdapter

__all__ = [
    'AsyncFileSystemAdapter',
]
