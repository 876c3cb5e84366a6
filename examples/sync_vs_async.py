#!/usr/bin/env python3
"""
Compare the async and threaded walkers on the same tree.

Both visit the same entries; only the execution model differs.
"""

import asyncio
import sys
import threading
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlewalk import walk_async
from dazzlewalk.sync import walk_sync


def make_counter():
    lock = threading.Lock()
    seen = []

    def worker(path, stats):
        with lock:
            seen.append(path)
        return not Path(path).name.startswith('.')

    return worker, seen


def main():
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    worker, seen = make_counter()
    start = time.perf_counter()
    asyncio.run(walk_async(root_path, worker))
    print(f"async:    {len(seen):,} entries in {time.perf_counter() - start:.3f}s")

    worker, seen = make_counter()
    start = time.perf_counter()
    walk_sync(root_path, worker)
    print(f"threaded: {len(seen):,} entries in {time.perf_counter() - start:.3f}s")


if __name__ == "__main__":
    main()
