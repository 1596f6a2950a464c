import pytest

from trips_helpers import FakeDataRoot


@pytest.fixture
def data_root():
    return FakeDataRoot()
