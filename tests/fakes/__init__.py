from tests.fakes.clock import FakeClock
from tests.fakes.dispatcher import FakeDispatcher, FakeReceiver
from tests.fakes.fitbit import FakeFitbitClient, json_response
from tests.fakes.heart_rate_source import FakeHeartRateSource
from tests.fakes.logger import FakeLogger
from tests.fakes.state_store import FakeStateStore

__all__ = [
    "FakeClock",
    "FakeDispatcher",
    "FakeFitbitClient",
    "FakeHeartRateSource",
    "FakeLogger",
    "FakeReceiver",
    "FakeStateStore",
    "json_response",
]
