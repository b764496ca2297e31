from fitpulse.infra.dispatch.thread import ThreadDispatcher

__all__ = ["ThreadDispatcher"]
