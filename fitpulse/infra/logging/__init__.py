from fitpulse.infra.logging.console import ConsoleLogger
from fitpulse.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
