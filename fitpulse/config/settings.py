import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class FitbitSettings:
    access_token: Optional[str] = None
    user_id: Optional[str] = None
    refresh_token: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    device_id: str = "default"


@dataclass(frozen=True, slots=True)
class HttpSettings:
    timeout: float


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class JobSettings:
    tick_interval: float


@dataclass(frozen=True, slots=True)
class StateSettings:
    backend: str
    base_dir: str
    redis_url: str
    persist_tokens: bool


@dataclass(frozen=True, slots=True)
class Settings:
    fitbit: FitbitSettings
    http: HttpSettings
    logging: LoggingSettings
    jobs: JobSettings
    state: StateSettings


def load_settings() -> Settings:
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))

    fitbit = FitbitSettings(
        access_token=_get_env_or_default("FITBIT_ACCESS_TOKEN"),
        user_id=_get_env_or_default("FITBIT_USER_ID"),
        refresh_token=_get_env_or_default("FITBIT_REFRESH_TOKEN"),
        client_id=_get_env_or_default("FITBIT_CLIENT_ID"),
        client_secret=_get_env_or_default("FITBIT_CLIENT_SECRET"),
        device_id=_get_env_or_default("FITPULSE_DEVICE_ID", "default"),
    )

    http_timeout = _env_float("FITPULSE_HTTP_TIMEOUT", 10.0)

    logging_backend = _get_env_or_default("FITPULSE_LOGGER_BACKEND", "console").lower()
    logging_name = _get_env_or_default("FITPULSE_LOGGER_NAME", "fitpulse")
    logfire_token = _get_env_or_default("FITPULSE_LOGFIRE_TOKEN")

    tick_interval = _env_float("FITPULSE_TICK_INTERVAL", 0.25)

    state_backend = _get_env_or_default("FITPULSE_STATE_BACKEND", "file").lower()
    state_dir = _get_env_or_default("FITPULSE_STATE_DIR", ".fitpulse/state")
    redis_url = _get_env_or_default("FITPULSE_REDIS_URL", "redis://localhost:6379/0")
    persist_tokens = _env_bool("FITPULSE_PERSIST_TOKENS", False)

    return Settings(
        fitbit=fitbit,
        http=HttpSettings(timeout=http_timeout),
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            logfire_token=logfire_token,
        ),
        jobs=JobSettings(tick_interval=tick_interval),
        state=StateSettings(
            backend=state_backend,
            base_dir=state_dir,
            redis_url=redis_url,
            persist_tokens=persist_tokens,
        ),
    )


def _get_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_float(name: str, default: float) -> float:
    return float(_get_env_or_default(name) or default)


def _env_bool(name: str, default: bool) -> bool:
    value = _get_env_or_default(name)
    if value is None:
        return default
    return value.upper() == "TRUE"
