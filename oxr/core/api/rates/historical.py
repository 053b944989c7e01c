from __future__ import annotations

from oxr.core.logger import setup_logger
from oxr.schemas.api.base import apply_options
from oxr.schemas.api.rates.historical import (
    HistoricalOption,
    HistoricalParams,
    HistoricalRatesResponse,
)

logger = setup_logger("rates.historical")


class HistoricalService:
    """Курсы на заданную дату (доступны с 1 января 1999)."""

    def __init__(self, api):
        self.api = api

    async def get(self, *opts: HistoricalOption) -> HistoricalRatesResponse:
        params = apply_options(HistoricalParams(), opts)
        return await self.api.call(params.path(), params.to_query(), HistoricalRatesResponse)
