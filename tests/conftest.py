import pytest

from imagine_gen.core.seed import isolated_registry


@pytest.fixture(autouse=True)
def fresh_global_stream():
    # every test starts from the default global seed and leaks nothing
    with isolated_registry() as registry:
        yield registry
