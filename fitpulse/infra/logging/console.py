import logging
from datetime import datetime
from typing import Any, Mapping

from fitpulse.core.ports.logger import Logger

_SECRET_KEYS = frozenset({"access_token", "refresh_token", "client_secret"})
_LINE_FORMAT = '%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s'


def render_context(context: Mapping[str, Any]) -> str:
    """Render log context as ``key=value`` pairs.

    Unset values are dropped, datetimes are written as ISO-8601 and credential
    fields are masked.
    """
    pairs = []
    for key, value in context.items():
        if value is None:
            continue
        if key in _SECRET_KEYS:
            value = '***'
        elif isinstance(value, datetime):
            value = value.isoformat()
        pairs.append(f'{key}={value!r}' if isinstance(value, str) else f'{key}={value}')
    return ' '.join(pairs)


class _KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        pairs = render_context(getattr(record, 'context', None) or {})
        return f'{base} | {pairs}' if pairs else base


class ConsoleLogger(Logger):
    """Poll scheduler and fetch workers share one stream handler.

    Workers log from their own threads, so the thread name is part of every
    line.
    """

    def __init__(self, name: str, level: int = logging.DEBUG) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(_KeyValueFormatter(_LINE_FORMAT))
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, extra={'context': kwargs})

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, extra={'context': kwargs})

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, extra={'context': kwargs})

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, extra={'context': kwargs})

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(message, extra={'context': kwargs})
