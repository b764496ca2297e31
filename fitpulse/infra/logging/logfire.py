from typing import Any

from fitpulse.core.ports.logger import Logger


def _load_logfire():
    try:
        import logfire
    except ImportError as error:
        raise RuntimeError('logfire library is not installed') from error
    return logfire


def configure_logfire(api_token: str, service_name: str = 'fitpulse') -> None:
    logfire = _load_logfire()
    logfire.configure(token=api_token, service_name=service_name)


class LogfireLogger(Logger):
    """Sends log records to Logfire with context as structured attributes."""

    def __init__(self, name: str) -> None:
        logfire = _load_logfire()
        self._logfire = logfire.with_tags(name)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logfire.debug(message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logfire.info(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logfire.warn(message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logfire.error(message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logfire.exception(message, **kwargs)
