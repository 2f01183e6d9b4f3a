import pytest

from dirargs.config import DIALECT_ENV_VAR


@pytest.fixture(autouse=True)
def _no_dialect_from_env(monkeypatch):
    # a developer's DIRARGS_DIALECT must not leak into tests
    monkeypatch.delenv(DIALECT_ENV_VAR, raising=False)
