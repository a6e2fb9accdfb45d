import pytest

from rsp.interpreter import Interpreter
from rsp.modules.module_cache import get_module_cache
from rsp.types.environment import Environment


@pytest.fixture(autouse=True)
def _fresh_module_cache():
    # The cache is process-wide, every test starts from an empty one
    cache = get_module_cache()
    cache.clear()
    yield cache
    cache.clear()


@pytest.fixture
def env():
    return Environment.with_prelude()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def module_dir(tmp_path, monkeypatch):
    """A temporary working directory for module files."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
