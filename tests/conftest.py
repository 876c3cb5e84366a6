"""Shared fixtures for the DazzleWalk test suite.

Test directory structure (``foo_tree``):
    foo/
      a/  g h i j k l
      b/  m n o p q r
      c/  s t u v w x y z
      d
      e
      f
"""

import os

import pytest

from dazzlewalk.testing import FOO_LAYOUT, build_tree


@pytest.fixture
def foo_tree(tmp_path):
    """Create the foo/ fixture tree and return its path as a str."""
    return str(build_tree(tmp_path / 'foo', FOO_LAYOUT))


@pytest.fixture
def symlink_tree(tmp_path):
    """A directory ``real/`` holding ``x``, and ``alias`` linking to it."""
    root = tmp_path / 'links'
    build_tree(root, {'real': {'x': None}})
    try:
        os.symlink(root / 'real', root / 'alias', target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")
    return str(root)


def basenames(paths):
    """Sorted base names joined into one string, for compact assertions."""
    return ''.join(sorted(os.path.basename(p) for p in paths))
