from fitpulse.core.schema.fetch import (
    FetchFailure,
    FetchRequest,
    FetchResult,
    FetchSuccess,
    TokenUpdate,
)
from fitpulse.core.schema.heart_rate import HeartRateSample, HeartRateSeries
from fitpulse.core.schema.token import TokenCache

__all__ = [
    "FetchRequest",
    "FetchResult",
    "FetchSuccess",
    "FetchFailure",
    "TokenUpdate",
    "TokenCache",
    "HeartRateSample",
    "HeartRateSeries",
]
