"""Core abstractions for async walking.

This module defines the adapter interface and the recursive walker.
All I/O goes through async/await for non-blocking execution.
"""

from .adapter import AsyncWalkAdapter
from .walker import AsyncWalker

__all__ = [
    'AsyncWalkAdapter',
    'AsyncWalker',
]
