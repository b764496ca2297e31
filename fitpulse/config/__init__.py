from fitpulse.config.settings import (
    FitbitSettings,
    HttpSettings,
    JobSettings,
    LoggingSettings,
    Settings,
    StateSettings,
    load_settings,
)

__all__ = [
    'Settings',
    'FitbitSettings',
    'HttpSettings',
    'LoggingSettings',
    'JobSettings',
    'StateSettings',
    'load_settings',
]
