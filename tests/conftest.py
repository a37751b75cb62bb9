import os

import pytest


@pytest.fixture
def touch(tmp_path):
    """Create a file in tmp_path with the given modification time (ns)."""

    def _touch(name: str, mtime_ns: int, content: str = "", directory=None):
        path = (directory or tmp_path) / name
        path.write_text(content, encoding="utf-8")
        os.utime(path, ns=(mtime_ns, mtime_ns))
        return path

    return _touch
