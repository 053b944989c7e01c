from __future__ import annotations

from oxr.core.logger import setup_logger
from oxr.schemas.api.base import apply_options
from oxr.schemas.api.rates.time_series import (
    TimeSeriesOption,
    TimeSeriesParams,
    TimeSeriesResponse,
)

logger = setup_logger("rates.time_series")


class TimeSeriesService:
    PATH = "time-series.json"

    def __init__(self, api):
        self.api = api

    async def get(self, *opts: TimeSeriesOption) -> TimeSeriesResponse:
        """Курсы за период (bulk-выгрузка)."""
        params = apply_options(TimeSeriesParams(), opts)
        return await self.api.call(self.PATH, params.to_query(), TimeSeriesResponse)
