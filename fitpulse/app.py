from fitpulse.config import Settings, load_settings
from fitpulse.core.jobs import HeartRateJob
from fitpulse.core.polling import FetchWorker, PollScheduler
from fitpulse.core.ports.logger import Logger
from fitpulse.core.ports.state_store import StateStore
from fitpulse.infra import (
    ConsoleLogger,
    FileStateStore,
    FitbitClient,
    FitbitHeartRateSource,
    LogfireLogger,
    RedisStateStore,
    SystemClock,
    ThreadDispatcher,
    TokenStateStore,
    configure_logfire,
)


def main() -> None:
    settings = load_settings()
    logger = build_logger(settings)
    clock = SystemClock()
    token_state = TokenStateStore(
        build_state_store(settings),
        persist_tokens=settings.state.persist_tokens,
    )

    with FitbitClient(timeout=settings.http.timeout) as client:
        worker = FetchWorker(
            source=FitbitHeartRateSource(client, clock),
            clock=clock,
            logger=logger,
        )
        scheduler = PollScheduler(
            logger=logger,
            clock=clock,
            worker=worker,
            dispatcher=ThreadDispatcher(),
            token_state=token_state,
            device_id=settings.fitbit.device_id,
        )
        job = HeartRateJob(
            logger=logger,
            tick_interval=settings.jobs.tick_interval,
            clock=clock,
            scheduler=scheduler,
            config=settings.fitbit,
        )
        try:
            job.run()
        except KeyboardInterrupt:
            logger.info('Shutdown requested')
        finally:
            job.stop()


def build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ValueError(
                'Logfire backend selected but FITPULSE_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ValueError(f'Unknown logging backend {settings.logging.backend}')


def build_state_store(settings: Settings) -> StateStore:
    if settings.state.backend == 'file':
        return FileStateStore(settings.state.base_dir)
    if settings.state.backend == 'redis':
        return RedisStateStore.from_url(settings.state.redis_url)
    raise ValueError(f'Unknown state backend {settings.state.backend}')
