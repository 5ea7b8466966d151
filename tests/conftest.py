"""Shared pytest fixtures for Ledgit tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from ledgit.core.config import Config
from ledgit.core.repository import Repository


class FixedClock:
    """Clock returning a fixed timestamp that advances one second per call."""
    
    def __init__(self, start=1698660000):
        self.now = start
    
    def __call__(self):
        self.now += 1
        return self.now


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's global config and LEDGIT_* variables."""
    import os
    
    for key in list(os.environ):
        if key.startswith('LEDGIT_'):
            monkeypatch.delenv(key)
    global_path = tmp_path / 'global.ledgitconfig'
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', global_path)
    return global_path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def clock():
    """Deterministic commit clock."""
    return FixedClock()


@pytest.fixture
def repo(clock):
    """Repository tracking a.txt and b.txt."""
    return Repository(['a.txt', 'b.txt'], clock=clock)


@pytest.fixture
def contents():
    """Working-tree contents served by the provider fixture."""
    return {
        'a.txt': b'alpha\n',
        'b.txt': b'bravo\n',
        'c.txt': b'charlie\n',
    }


@pytest.fixture
def provider(contents):
    """Content provider reading from the contents fixture."""
    return lambda path: contents[path]


@pytest.fixture
def work_tree(temp_dir):
    """Create sample files on disk."""
    (temp_dir / 'file1.txt').write_text('Content 1')
    (temp_dir / 'file2.txt').write_text('Content 2')
    (temp_dir / 'subdir').mkdir()
    (temp_dir / 'subdir' / 'file3.txt').write_text('Content 3')
    return temp_dir
