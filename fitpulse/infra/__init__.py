from fitpulse.infra.channel import OneShotChannel
from fitpulse.infra.clock import SystemClock
from fitpulse.infra.dispatch import ThreadDispatcher
from fitpulse.infra.fitbit import FitbitClient, FitbitHeartRateSource
from fitpulse.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire
from fitpulse.infra.state import FileStateStore, RedisStateStore, TokenStateStore

__all__ = [
    'FitbitClient',
    'FitbitHeartRateSource',
    'OneShotChannel',
    'ThreadDispatcher',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
    'SystemClock',
    'FileStateStore',
    'RedisStateStore',
    'TokenStateStore',
]
