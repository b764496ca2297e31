from fitpulse.core.jobs.base import BaseJob
from fitpulse.core.jobs.heart_rate import HeartRateJob, always_visible

__all__ = [
    'BaseJob',
    'HeartRateJob',
    'always_visible',
]
