from fitpulse.infra.fitbit.client import FitbitClient, HttpResponse
from fitpulse.infra.fitbit.heart_rate_source import FitbitHeartRateSource

__all__ = ["FitbitClient", "FitbitHeartRateSource", "HttpResponse"]
