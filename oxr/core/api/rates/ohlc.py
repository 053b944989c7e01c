from __future__ import annotations

from oxr.core.logger import setup_logger
from oxr.schemas.api.base import apply_options
from oxr.schemas.api.rates.ohlc import OHLCOption, OHLCParams, OHLCResponse

logger = setup_logger("rates.ohlc")


class OHLCService:
    """Open/High/Low/Close/Average за период от 1 минуты до 1 месяца."""

    PATH = "ohlc.json"

    def __init__(self, api):
        self.api = api

    async def get(self, *opts: OHLCOption) -> OHLCResponse:
        params = apply_options(OHLCParams(), opts)
        return await self.api.call(self.PATH, params.to_query(), OHLCResponse)
