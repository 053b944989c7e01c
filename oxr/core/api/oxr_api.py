from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar

from oxr.core.api.client import APIClient, Doer
from oxr.core.logger import setup_logger

logger = setup_logger("oxr_api")
T = TypeVar("T")


class OXRApi:
    """
    Точка входа: по одному сервису на эндпоинт Open Exchange Rates.

        async with OXRApi(app_id="...", http_client=httpx.AsyncClient()) as api:
            latest = await api.latest.get(latest_for_base_currency("USD"))

    Экземпляр не хранит состояния вызовов, поэтому его можно использовать
    из нескольких задач одновременно. Отмена — обычная отмена asyncio-задачи.
    """

    def __init__(
        self,
        app_id: Optional[str] = None,
        *,
        http_client: Optional[Doer] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._client = APIClient(
            app_id, http_client=http_client, base_url=base_url, timeout=timeout
        )

        from oxr.core.api.account.usage import UsageService
        from oxr.core.api.rates.convert import ConvertService
        from oxr.core.api.rates.historical import HistoricalService
        from oxr.core.api.rates.latest import LatestService
        from oxr.core.api.rates.ohlc import OHLCService
        from oxr.core.api.rates.time_series import TimeSeriesService
        from oxr.core.api.references.currencies import CurrenciesService

        self.latest = LatestService(self)
        self.historical = HistoricalService(self)
        self.currencies = CurrenciesService(self)
        self.time_series = TimeSeriesService(self)
        self.convert = ConvertService(self)
        self.ohlc = OHLCService(self)
        self.usage = UsageService(self)

    @property
    def app_id(self) -> str:
        return self._client.app_id

    @property
    def base_url(self) -> str:
        return self._client.base_url

    async def call(self, path: str, query: Mapping[str, str], response_model: Type[T]) -> T:
        return await self._client.get(path=path, query=query, response_model=response_model)

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "OXRApi":
        return self

    async def __aexit__(self, *_: Any):
        await self.close()
