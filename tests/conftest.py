import pytest

from signature import hash_func


@pytest.fixture(autouse=True)
def restore_hash_func():
    """Every test starts and ends with the default SHA-1 selection."""
    hash_func.set_hash_func(hash_func.sha1_hash)
    yield
    hash_func.set_hash_func(hash_func.sha1_hash)
