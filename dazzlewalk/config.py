"""Configuration re-export.

The configuration lives in the internal _common package; this module is
the public import location.
"""

from ._common.config import WalkConfig, ErrorMode

__all__ = [
    'WalkConfig',
    'ErrorMode',
]
