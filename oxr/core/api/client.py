# oxr/core/api/client.py
from __future__ import annotations

import json
import time
import uuid
from typing import Mapping, Optional, Protocol, Type, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from oxr.config.settings import settings
from oxr.core.api.errors import BadResponseError, DecodeError
from oxr.core.logger import setup_logger

logger = setup_logger("api_client")
TResponse = TypeVar("TResponse", bound=BaseModel)


class Doer(Protocol):
    """
    Транспорт: отправляет готовый httpx.Request и возвращает httpx.Response.
    httpx.AsyncClient подходит как есть.
    """

    async def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        ...


class APIClient:
    """
    Клиент Open Exchange Rates под конкретный App ID.

    Делает:
      • сборку URL: base_url + путь эндпоинта + query (app_id и параметры)
      • один GET через переданный транспорт (без повторов)
      • проверку статуса: всё, кроме 200, — BadResponseError
      • разбор JSON в pydantic-модель ответа, иначе DecodeError
      • освобождение тела ответа на любом пути выхода
    Ошибки транспорта пробрасываются как есть.
    """

    SUCCESS_STATUS = 200

    # ограничение на превью тела в логах
    RESP_PREVIEW_LIMIT = 4_000  # chars

    def __init__(
        self,
        app_id: Optional[str] = None,
        *,
        http_client: Optional[Doer] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.app_id = settings.app_id if app_id is None else app_id
        self.base_url = (base_url or settings.base_url).rstrip("/") + "/"

        # если транспорт не передан — создаём свой и сами его закрываем
        self.http = http_client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.http_timeout
        )
        self._owns_http = http_client is None

        logger.debug(
            "Инициализирован APIClient: base_url=%s, app_id=%s, own_transport=%s",
            self.base_url, self._mask_app_id(self.app_id), self._owns_http,
        )

    # ------------------------ служебные ------------------------

    @staticmethod
    def _new_trace_id() -> str:
        return uuid.uuid4().hex[:12]

    @staticmethod
    def _mask_app_id(app_id: str) -> str:
        if len(app_id) <= 8:
            return "******"
        return f"{app_id[:4]}...{app_id[-4:]}"

    @staticmethod
    def _prettify_json(text: str) -> str:
        try:
            obj = json.loads(text)
            return json.dumps(obj, ensure_ascii=False, indent=2)
        except ValueError:
            return text

    def build_url(self, path: str, query: Mapping[str, str]) -> str:
        """
        {base_url}{path}?{query}

        app_id добавляется всегда; ключи сортируются, значения
        кодируются как form-urlencoded (":" -> %3A, "," -> %2C).
        """
        params = {"app_id": self.app_id, **query}
        encoded = urlencode(sorted(params.items()))
        return f"{self.base_url}{path}?{encoded}"

    def _masked(self, url: str) -> str:
        if not self.app_id:
            return url
        return url.replace(
            f"app_id={self.app_id}", f"app_id={self._mask_app_id(self.app_id)}", 1
        )

    # -------------------------- GET ---------------------------

    async def get(
        self,
        path: str,
        query: Mapping[str, str],
        response_model: Type[TResponse],
    ) -> TResponse:
        """
        GET {base_url}{path}?app_id=...&<query>

        Порядок:
          - сборка запроса (ошибка URL всплывает до обращения к транспорту)
          - отправка через транспорт; его ошибки не оборачиваются
          - статус != 200 -> BadResponseError, тело не разбирается
          - JSON -> response_model, несовпадение схемы -> DecodeError
        """
        url = self.build_url(path, query)
        request = httpx.Request("GET", url)
        trace_id = self._new_trace_id()
        masked_url = self._masked(url)

        logger.info("↗️  [trace:%s] GET %s", trace_id, masked_url)

        t0 = time.perf_counter()
        resp = await self.http.send(request, stream=True)
        try:
            elapsed_ms = (time.perf_counter() - t0) * 1000.0
            logger.info("↘️  [trace:%s] %s -> %s in %.1fms",
                        trace_id, masked_url, resp.status_code, elapsed_ms)

            if resp.status_code != self.SUCCESS_STATUS:
                logger.warning("[trace:%s] Неуспешный статус %s", trace_id, resp.status_code)
                raise BadResponseError(resp.status_code, masked_url)

            raw = await resp.aread()
            logger.debug(
                "Response body (preview): %s",
                self._prettify_json(raw[: self.RESP_PREVIEW_LIMIT].decode("utf-8", errors="replace")),
            )

            try:
                return response_model.model_validate_json(raw)
            except ValidationError as e:
                logger.error("[trace:%s] Ответ не совпадает с %s: %s",
                             trace_id, response_model.__name__, e)
                raise DecodeError(response_model.__name__, str(e)) from e
        finally:
            await resp.aclose()

    # ---------------------- lifecycle -------------------------

    async def close(self) -> None:
        if self._owns_http:
            logger.debug("Закрытие httpx.AsyncClient")
            await self.http.aclose()  # type: ignore[attr-defined]

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
