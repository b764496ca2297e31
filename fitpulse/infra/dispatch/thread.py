import threading
from typing import Callable, TypeVar

from fitpulse.core.ports.dispatcher import Dispatcher, Receiver
from fitpulse.infra.channel.oneshot import OneShotChannel

T = TypeVar('T')


class ThreadDispatcher(Dispatcher):
    def __init__(self, name: str = 'FetchWorker') -> None:
        self._name = name

    def spawn(self, task: Callable[[], T]) -> Receiver[T]:
        channel: OneShotChannel[T] = OneShotChannel()
        thread = threading.Thread(
            target=self._run,
            args=(task, channel),
            name=self._name,
            daemon=True,
        )
        thread.start()
        return channel

    @staticmethod
    def _run(task: Callable[[], T], channel: OneShotChannel[T]) -> None:
        try:
            channel.send(task())
        finally:
            channel.close()
