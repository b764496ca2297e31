from datetime import datetime


class FitpulseError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SourceError(FitpulseError):
    def __init__(self, message: str, status: int = 0) -> None:
        self.status = status
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} (status {self.status})"


class TransportError(SourceError):
    def __init__(self, message: str) -> None:
        super().__init__(message, status=0)


class SourceHttpError(SourceError):
    pass


class SourceAuthenticationError(SourceHttpError):
    def __init__(self, message: str) -> None:
        super().__init__(message, status=401)


class SourceRateLimitError(SourceHttpError):
    def __init__(self, message: str, retry_after: datetime | None = None) -> None:
        self.retry_after = retry_after
        super().__init__(message, status=429)


class ResponseParseError(SourceError):
    def __init__(self, message: str) -> None:
        super().__init__(message, status=0)


class CredentialsMissingError(SourceError):
    def __init__(self, message: str) -> None:
        super().__init__(message, status=0)


class TokenRefreshError(SourceError):
    pass


class ChannelError(FitpulseError):
    pass


class ChannelClosedError(ChannelError):
    pass


class ChannelFullError(ChannelError):
    pass


class StateStoreError(FitpulseError):
    pass
