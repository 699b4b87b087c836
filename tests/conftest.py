import pytest

from list_rotation import RotationConfig, reset_registry


@pytest.fixture(autouse=True)
def registry():
    """Give every test an empty process-wide registry with default config."""
    return reset_registry(RotationConfig())
