from __future__ import annotations

from oxr.core.logger import setup_logger
from oxr.schemas.api.account.usage import UsageOption, UsageParams, UsageResponse
from oxr.schemas.api.base import apply_options

logger = setup_logger("account.usage")


class UsageService:
    """Тариф и статистика использования App ID."""

    PATH = "usage.json"

    def __init__(self, api):
        self.api = api

    async def get(self, *opts: UsageOption) -> UsageResponse:
        params = apply_options(UsageParams(), opts)
        return await self.api.call(self.PATH, params.to_query(), UsageResponse)
