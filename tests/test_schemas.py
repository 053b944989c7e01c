from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from oxr.schemas.api.base import format_amount, format_date, format_rfc3339
from oxr.schemas.api.rates.convert import (
    ConvertParams,
    convert_for_base_currency,
    convert_for_destination_currency,
    convert_with_value,
)
from oxr.schemas.api.rates.latest import LatestParams
from oxr.schemas.api.rates.ohlc import OHLCParams, Period, ohlc_for_period


@pytest.mark.parametrize(
    "value, expected",
    [
        (100.12, "100.12"),
        (100.0, "100"),
        (250, "250"),
        (0, "0"),
        (0.5, "0.5"),
        (0.001, "0.001"),
        (0.00001, "1e-05"),
        (123456.0, "123456"),
        (1000000.0, "1e+06"),
        (1234567.0, "1.234567e+06"),
        (-42.5, "-42.5"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_period_codes():
    assert [str(p) for p in Period] == ["1m", "5m", "15m", "30m", "1h", "12h", "1d", "1w", "1mo"]


def test_ohlc_period_serialized_as_code():
    params = OHLCParams()
    ohlc_for_period(Period.OneMonth)(params)

    assert params.to_query()["period"] == "1mo"


def test_format_rfc3339():
    assert format_rfc3339(datetime(2022, 3, 15, 13, 0, tzinfo=timezone.utc)) == "2022-03-15T13:00:00Z"
    assert format_rfc3339(datetime(2022, 3, 15, 13, 0, 5, 999)) == "2022-03-15T13:00:05Z"
    plus_two = timezone(timedelta(hours=2))
    assert format_rfc3339(datetime(2022, 3, 15, 15, 0, tzinfo=plus_two)) == "2022-03-15T15:00:00+02:00"


def test_format_date():
    assert format_date(date.min) == "0001-01-01"
    assert format_date(datetime(2013, 1, 31, 13, 0)) == "2013-01-31"


def test_params_are_fresh_per_instance():
    first = LatestParams()
    first.destination_currencies.append("GBP")

    assert LatestParams().destination_currencies == []


def test_convert_path():
    params = ConvertParams()
    for opt in (
        convert_with_value(100.12),
        convert_for_base_currency("GBP"),
        convert_for_destination_currency("USD"),
    ):
        opt(params)

    assert params.path() == "convert/100.12/GBP/USD"
    assert params.to_query() == {"prettyprint": "false"}


def test_convert_defaults_path():
    assert ConvertParams().path() == "convert/0//"
