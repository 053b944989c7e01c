from __future__ import annotations

from oxr.core.logger import setup_logger
from oxr.schemas.api.base import apply_options
from oxr.schemas.api.rates.latest import LatestOption, LatestParams, LatestRatesResponse

logger = setup_logger("rates.latest")


class LatestService:
    """Последние доступные курсы."""

    PATH = "latest.json"

    def __init__(self, api):
        self.api = api

    async def get(self, *opts: LatestOption) -> LatestRatesResponse:
        """https://docs.openexchangerates.org/docs/latest-json"""
        params = apply_options(LatestParams(), opts)
        return await self.api.call(self.PATH, params.to_query(), LatestRatesResponse)
