from __future__ import annotations

import pytest

from conftest import SpyDoer
from oxr.core.api.errors import BadResponseError, DecodeError
from oxr.schemas.api.references.currencies import (
    currencies_with_alternatives,
    currencies_with_inactive,
    currencies_with_pretty_print,
)

CURRENCIES_BODY = """{
  "EUR": "Euro",
  "GBP": "Pound sterling",
  "USD": "US Dollar"
}"""


@pytest.mark.asyncio
async def test_currencies_success(make_api):
    doer = SpyDoer(200, CURRENCIES_BODY)
    api = make_api(doer)

    result = await api.currencies.get(
        currencies_with_inactive(True),
        currencies_with_pretty_print(True),
    )

    assert doer.url == (
        "https://openexchangerates.org/api/currencies.json"
        "?app_id=test&prettyprint=true&show_alternative=false&show_inactive=true"
    )
    assert result.currencies == {"EUR": "Euro", "GBP": "Pound sterling", "USD": "US Dollar"}
    assert doer.stream.closed


@pytest.mark.asyncio
async def test_currencies_body_is_the_mapping(make_api):
    doer = SpyDoer(200, '{"EUR":"Euro"}')
    api = make_api(doer)

    result = await api.currencies.get(currencies_with_alternatives(True))

    assert result.currencies == {"EUR": "Euro"}
    assert doer.requests[-1].url.params["show_alternative"] == "true"


@pytest.mark.asyncio
async def test_currencies_defaults(make_api):
    doer = SpyDoer(401, '{"error": true}')
    api = make_api(doer)

    with pytest.raises(BadResponseError) as exc_info:
        await api.currencies.get()

    assert exc_info.value.status_code == 401
    assert doer.url == (
        "https://openexchangerates.org/api/currencies.json"
        "?app_id=test&prettyprint=false&show_alternative=false&show_inactive=false"
    )


@pytest.mark.asyncio
async def test_currencies_non_string_name_is_decode_error(make_api):
    doer = SpyDoer(200, '{"EUR": 1}')
    api = make_api(doer)

    with pytest.raises(DecodeError) as exc_info:
        await api.currencies.get()

    assert exc_info.value.model_name == "CurrenciesResponse"
    assert doer.stream.closed
