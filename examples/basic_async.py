#!/usr/bin/env python3
"""
Basic async walk example showing worker-controlled recursion.

This example demonstrates:
- Pruning hidden directories and common build folders from the worker
- Summing file sizes from the stats passed to the worker
- Collecting every unreadable path with the collect error mode
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlewalk import WalkConfig, WalkErrorGroup, walk_async

SKIPPED = {'.git', '__pycache__', 'node_modules', '.venv'}


async def main():
    """Summarize a directory tree."""
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    print(f"Walking: {root_path}")
    print("-" * 50)

    totals = {'dirs': 0, 'files': 0, 'bytes': 0}

    def worker(path, stats):
        if stats.is_dir():
            if Path(path).name in SKIPPED:
                return False
            totals['dirs'] += 1
            return True
        if stats.is_file():
            totals['files'] += 1
            totals['bytes'] += stats.size
        return True

    def completion(error=None):
        if isinstance(error, WalkErrorGroup):
            print(f"\n{len(error)} path(s) could not be read:")
            for path in error.paths[:5]:
                print(f"  {path}")
        elif error is not None:
            print(f"\nWalk failed: {error}")

    await walk_async(root_path, worker, completion,
                     config=WalkConfig(error_mode='collect'))

    print(f"\nWalk Summary:")
    print(f"  Directories: {totals['dirs']:,}")
    print(f"  Files: {totals['files']:,}")
    print(f"  Total Size: {totals['bytes'] / 1024 / 1024:.1f} MB")


if __name__ == "__main__":
    print("DazzleWalk - Basic Async Walk Example")
    print("=" * 50)
    asyncio.run(main())
