import sys
import pytest

from via.globals import setRegistry
from via.registry import AliasRegistry



def pytest_configure(config: pytest.Config) -> None:
    if sys.flags.optimize:
        raise RuntimeError("Assertions are disabled (optimize > 0)")



@pytest.fixture()
def registry() -> AliasRegistry:
    return AliasRegistry()



@pytest.fixture()
def projectRegistry() -> AliasRegistry:
    """Registry with the usual project layout used across tests."""
    reg = AliasRegistry()
    reg.setLocalRoot("/Users/test/project")
    reg.setHost("example.com")
    reg.setBase("data", "data")
    reg.setBase("src", "src")
    reg.assignToBase("logs", "logs", "data")
    reg.assignToBase("components", "components", "src")
    return reg



@pytest.fixture()
def defaultRegistry():
    """Swaps in a fresh process-default registry for the duration of a test."""
    reg = AliasRegistry()
    setRegistry(reg)
    yield reg
    setRegistry(None)
