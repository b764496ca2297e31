import threading
from queue import Empty, Full, Queue as ThreadQueue
from typing import Generic, Optional, TypeVar

from fitpulse.core.exceptions import ChannelClosedError, ChannelFullError
from fitpulse.core.ports.dispatcher import Receiver

T = TypeVar('T')


class OneShotChannel(Generic[T], Receiver[T]):
    """Single-slot handoff from one producer thread to one consumer."""

    def __init__(self) -> None:
        self._slot: ThreadQueue[T] = ThreadQueue(maxsize=1)
        self._closed = threading.Event()

    def send(self, value: T) -> None:
        if self._closed.is_set():
            raise ChannelClosedError('Channel is closed')
        try:
            self._slot.put_nowait(value)
        except Full as error:
            raise ChannelFullError('Channel already holds a value') from error

    def close(self) -> None:
        self._closed.set()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def try_receive(self) -> Optional[T]:
        # Read the flag before the slot so a send-then-close is never lost.
        closed = self._closed.is_set()
        try:
            return self._slot.get_nowait()
        except Empty:
            if closed:
                raise ChannelClosedError('Channel closed without a value') from None
            return None
