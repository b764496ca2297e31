from fitpulse.infra.channel.oneshot import OneShotChannel

__all__ = ["OneShotChannel"]
