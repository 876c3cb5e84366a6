"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration (WalkConfig, ErrorMode)
- Entry metadata (EntryStats)
- Error types and aggregation policies
- Per-directory bookkeeping (StepKind, PendingCount)

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .errors import (
    WalkError,
    WalkArgumentError,
    WorkerError,
    WalkErrorGroup,
)
from .error_policies import (
    ErrorPolicy,
    FirstErrorPolicy,
    LastCompletedPolicy,
    CollectErrorsPolicy,
)
from .config import WalkConfig, ErrorMode
from .stats import EntryStats
from .frames import StepKind, PendingCount

__all__ = [
    'WalkError',
    'WalkArgumentError',
    'WorkerError',
    'WalkErrorGroup',
    'ErrorPolicy',
    'FirstErrorPolicy',
    'LastCompletedPolicy',
    'CollectErrorsPolicy',
    'WalkConfig',
    'ErrorMode',
    'EntryStats',
    'StepKind',
    'PendingCount',
]
