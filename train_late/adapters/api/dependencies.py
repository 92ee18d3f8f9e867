from __future__ import annotations

from fastapi import Depends, Request

from train_late.adapters.realtime import (
    HttpGtfsRealtimeFeedClient,
    LiveDelaySource,
    StubDelaySource,
)
from train_late.app.ports.output import IDelaySource
from train_late.app.services.lateness_service import LatenessService
from train_late.config import Settings
from train_late.domain.models import ScheduleIndex


def get_settings() -> Settings:
    return Settings.from_env()


def get_schedule_index(request: Request) -> ScheduleIndex:
    # Built once by the app lifespan before serving starts.
    return request.app.state.schedule


def get_delay_source(settings: Settings = Depends(get_settings)) -> IDelaySource:
    if settings.delay_source == "stub":
        return StubDelaySource.from_delays(settings.stub_delays())

    client = HttpGtfsRealtimeFeedClient(api_key=settings.api_key, url=settings.feed_url)
    return LiveDelaySource(feed_provider=client)


def get_lateness_service(
    schedule: ScheduleIndex = Depends(get_schedule_index),
    delay_source: IDelaySource = Depends(get_delay_source),
) -> LatenessService:
    return LatenessService(schedule=schedule, delay_source=delay_source)
