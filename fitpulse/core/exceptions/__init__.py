from fitpulse.core.exceptions.errors import (
    ChannelClosedError,
    ChannelError,
    ChannelFullError,
    CredentialsMissingError,
    FitpulseError,
    ResponseParseError,
    SourceAuthenticationError,
    SourceError,
    SourceHttpError,
    SourceRateLimitError,
    StateStoreError,
    TokenRefreshError,
    TransportError,
)

__all__ = [
    "FitpulseError",
    "SourceError",
    "TransportError",
    "SourceHttpError",
    "SourceAuthenticationError",
    "SourceRateLimitError",
    "ResponseParseError",
    "CredentialsMissingError",
    "TokenRefreshError",
    "ChannelError",
    "ChannelClosedError",
    "ChannelFullError",
    "StateStoreError",
]
