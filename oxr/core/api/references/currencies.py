from __future__ import annotations

from oxr.core.logger import setup_logger
from oxr.schemas.api.base import apply_options
from oxr.schemas.api.references.currencies import (
    CurrenciesOption,
    CurrenciesParams,
    CurrenciesResponse,
)

logger = setup_logger("references.currencies")


class CurrenciesService:
    """Справочник валют с полными наименованиями."""

    PATH = "currencies.json"

    def __init__(self, api):
        self.api = api

    async def get(self, *opts: CurrenciesOption) -> CurrenciesResponse:
        params = apply_options(CurrenciesParams(), opts)
        return await self.api.call(self.PATH, params.to_query(), CurrenciesResponse)
