import pytest

from tests.fakes import ScriptedExecutor, StubGenerator


@pytest.fixture
def executor() -> ScriptedExecutor:
    return ScriptedExecutor()


@pytest.fixture
def stub_generator() -> StubGenerator:
    return StubGenerator()
