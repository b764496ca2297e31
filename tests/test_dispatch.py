import threading
import time

import pytest

from fitpulse.core.exceptions import ChannelClosedError, ChannelFullError
from fitpulse.infra.channel.oneshot import OneShotChannel
from fitpulse.infra.dispatch.thread import ThreadDispatcher


def _receive(receiver, timeout: float = 2.0):  # noqa: ANN001, ANN202
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        value = receiver.try_receive()
        if value is not None:
            return value
        time.sleep(0.005)
    raise AssertionError("No value received")


class TestOneShotChannel:
    def test_empty_channel_returns_none(self) -> None:
        channel: OneShotChannel[int] = OneShotChannel()

        assert channel.try_receive() is None

    def test_receives_sent_value_once(self) -> None:
        channel: OneShotChannel[int] = OneShotChannel()
        channel.send(72)

        assert channel.try_receive() == 72
        assert channel.try_receive() is None

    def test_value_sent_before_close_is_still_received(self) -> None:
        channel: OneShotChannel[int] = OneShotChannel()
        channel.send(72)
        channel.close()

        assert channel.try_receive() == 72
        with pytest.raises(ChannelClosedError):
            channel.try_receive()

    def test_closed_without_value_raises(self) -> None:
        channel: OneShotChannel[int] = OneShotChannel()
        channel.close()

        with pytest.raises(ChannelClosedError):
            channel.try_receive()

    def test_second_send_is_rejected(self) -> None:
        channel: OneShotChannel[int] = OneShotChannel()
        channel.send(1)

        with pytest.raises(ChannelFullError):
            channel.send(2)

    def test_send_after_close_is_rejected(self) -> None:
        channel: OneShotChannel[int] = OneShotChannel()
        channel.close()

        with pytest.raises(ChannelClosedError):
            channel.send(1)


class TestThreadDispatcher:
    def test_runs_task_off_calling_thread(self) -> None:
        caller = threading.get_ident()
        dispatcher = ThreadDispatcher()

        receiver = dispatcher.spawn(threading.get_ident)

        assert _receive(receiver) != caller

    def test_try_receive_does_not_block_on_running_task(self) -> None:
        release = threading.Event()
        dispatcher = ThreadDispatcher()

        def task() -> str:
            release.wait(timeout=2.0)
            return "done"

        receiver = dispatcher.spawn(task)
        started = time.monotonic()
        assert receiver.try_receive() is None
        assert time.monotonic() - started < 0.5

        release.set()
        assert _receive(receiver) == "done"

    @pytest.mark.filterwarnings("ignore::pytest.PytestUnhandledThreadExceptionWarning")
    def test_failing_task_closes_channel_without_value(self) -> None:
        dispatcher = ThreadDispatcher()

        def task() -> int:
            raise RuntimeError("worker crashed")

        receiver = dispatcher.spawn(task)

        deadline = time.monotonic() + 2.0
        with pytest.raises(ChannelClosedError):
            while time.monotonic() < deadline:
                receiver.try_receive()
                time.sleep(0.005)
