from fitpulse.core.ports.clock import Clock
from fitpulse.core.ports.dispatcher import Dispatcher, Receiver
from fitpulse.core.ports.heart_rate_source import HeartRateSource
from fitpulse.core.ports.logger import Logger
from fitpulse.core.ports.state_store import StateStore
from fitpulse.core.ports.token_state import TokenState

__all__ = [
    "Logger",
    "Clock",
    "Dispatcher",
    "Receiver",
    "HeartRateSource",
    "StateStore",
    "TokenState",
]
