from __future__ import annotations

from typing import List, Optional

import httpx
import pytest

from oxr.core.api.oxr_api import OXRApi

TEST_APP_ID = "test"
BASE_URL = "https://openexchangerates.org/api/"


class SpyStream(httpx.AsyncByteStream):
    """Тело ответа, запоминающее, закрыли ли его."""

    def __init__(self, body: bytes = b"") -> None:
        self._body = body
        self.closed = False
        self.read = False

    async def __aiter__(self):
        self.read = True
        if self._body:
            yield self._body

    async def aclose(self) -> None:
        self.closed = True


class SpyDoer:
    """
    Транспорт для тестов: запоминает отправленные запросы и на каждый
    возвращает новый ответ с заданными статусом и телом (или бросает error).
    """

    def __init__(self, status_code: int = 200, body: str | bytes = b"", error: Optional[BaseException] = None):
        self.status_code = status_code
        self.body = body.encode() if isinstance(body, str) else body
        self.error = error
        self.requests: List[httpx.Request] = []
        self.streams: List[SpyStream] = []

    @property
    def url(self) -> str:
        return str(self.requests[-1].url) if self.requests else ""

    @property
    def stream(self) -> SpyStream:
        return self.streams[-1]

    async def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        body_stream = SpyStream(self.body)
        self.streams.append(body_stream)
        return httpx.Response(self.status_code, stream=body_stream, request=request)


@pytest.fixture()
def make_api():
    def _make(doer: SpyDoer, app_id: str = TEST_APP_ID, **kwargs) -> OXRApi:
        return OXRApi(app_id=app_id, http_client=doer, **kwargs)

    return _make
