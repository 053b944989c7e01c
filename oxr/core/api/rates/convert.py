from __future__ import annotations

from oxr.core.logger import setup_logger
from oxr.schemas.api.base import apply_options
from oxr.schemas.api.rates.convert import ConversionResponse, ConvertOption, ConvertParams

logger = setup_logger("rates.convert")


class ConvertService:
    """Пересчёт суммы из одной валюты в другую по последнему курсу."""

    def __init__(self, api):
        self.api = api

    async def get(self, *opts: ConvertOption) -> ConversionResponse:
        params = apply_options(ConvertParams(), opts)
        return await self.api.call(params.path(), params.to_query(), ConversionResponse)
