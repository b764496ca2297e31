from datetime import datetime, timezone

import fakeredis
import pytest

from tests.fakes import FakeClock, FakeLogger
from tests.settings import get_test_settings


@pytest.fixture
def redis_client():
    client = fakeredis.FakeRedis()
    yield client
    client.flushall()


@pytest.fixture
def test_settings():
    return get_test_settings()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def logger() -> FakeLogger:
    return FakeLogger()
