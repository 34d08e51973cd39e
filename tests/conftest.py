import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from store.client import MemoryStore


@pytest.fixture
def memory_store():
    """A fresh in-memory key-value store per test so nothing leaks between cases."""
    store = MemoryStore()
    yield store
    store.clear()


# Prevent pytest from attempting to collect any modules inside the engine
# package itself.  Keeps collection focused on the tests directory.

def pytest_ignore_collect(collection_path, config):
    text = str(collection_path)
    if os.path.sep + 'engine' + os.path.sep in text:
        return True
