"""Tests for the fire-and-forget walk entry point."""

import asyncio
import threading

import pytest

from conftest import basenames
from dazzlewalk import WalkArgumentError, walk


@pytest.mark.asyncio
async def test_walk_returns_before_traversal_inside_loop(foo_tree):
    """Inside a running loop the walk is scheduled, not run inline."""
    visited = []
    finished = asyncio.Event()
    outcome = []

    def completion(error=None):
        outcome.append(error)
        finished.set()

    result = walk(foo_tree, lambda p, s: visited.append(p) or True, completion)

    assert result is None
    assert visited == []
    await asyncio.wait_for(finished.wait(), timeout=10)
    assert outcome == [None]
    assert basenames(visited) == 'abcdefghijklmnopqrstuvwxyz'


@pytest.mark.asyncio
async def test_argument_error_arrives_through_completion(foo_tree):
    finished = asyncio.Event()
    outcome = []

    def completion(error=None):
        outcome.append(error)
        finished.set()

    walk(42, lambda p, s: True, completion)
    await asyncio.wait_for(finished.wait(), timeout=10)

    assert len(outcome) == 1
    assert isinstance(outcome[0], WalkArgumentError)


@pytest.mark.asyncio
async def test_unhandled_error_goes_to_loop_exception_handler(tmp_path):
    loop = asyncio.get_running_loop()
    reported = asyncio.Event()
    contexts = []

    def handler(loop, context):
        contexts.append(context)
        reported.set()

    loop.set_exception_handler(handler)
    try:
        walk(str(tmp_path / 'missing'), lambda p, s: True)
        await asyncio.wait_for(reported.wait(), timeout=10)
    finally:
        loop.set_exception_handler(None)

    assert isinstance(contexts[0]['exception'], FileNotFoundError)


def test_walk_without_loop_runs_on_thread(foo_tree):
    finished = threading.Event()
    visited = []
    outcome = []

    def completion(error=None):
        outcome.append(error)
        finished.set()

    walk(foo_tree, lambda p, s: visited.append(p) or False, completion)

    assert finished.wait(timeout=10)
    assert outcome == [None]
    assert basenames(visited) == 'abcdef'


def test_walk_without_loop_tolerates_invalid_completion(foo_tree):
    walk(foo_tree, lambda p, s: True, 'not-a-function')


def test_unhandled_error_without_loop_reaches_excepthook(tmp_path, monkeypatch):
    reported = threading.Event()
    errors = []

    def excepthook(args):
        errors.append(args.exc_value)
        reported.set()

    monkeypatch.setattr(threading, 'excepthook', excepthook)
    walk(str(tmp_path / 'missing'), lambda p, s: True)

    assert reported.wait(timeout=10)
    assert isinstance(errors[0], FileNotFoundError)
