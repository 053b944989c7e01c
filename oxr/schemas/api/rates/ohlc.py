from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import Field as PydField

from oxr.schemas.api.base import (
    ZERO_TIME,
    BaseSchema,
    Option,
    RatesParamsSchema,
    format_rfc3339,
    set_field,
)


class Period(str, Enum):
    """Допустимые периоды агрегации OHLC и их коды в запросе."""

    OneMinute = "1m"
    FiveMinute = "5m"
    FifteenMinute = "15m"
    ThirtyMinute = "30m"
    OneHour = "1h"
    TwelveHour = "12h"
    OneDay = "1d"
    OneWeek = "1w"
    OneMonth = "1mo"

    def __str__(self) -> str:
        return self.value


class OHLCParams(RatesParamsSchema):
    """
    Параметры запроса ohlc.json.

    start_date (RFC 3339) и period отправляются всегда; не заданный период
    уходит пустой строкой.
    """

    start_time: datetime = PydField(default=ZERO_TIME, description="Начало периода.")
    period: Union[Period, str] = PydField(default="", description="Длина периода.")

    def to_query(self) -> Dict[str, str]:
        query = super().to_query()
        query["start_date"] = format_rfc3339(self.start_time)
        query["period"] = str(self.period)
        return query


OHLCOption = Option[OHLCParams]


def ohlc_for_start_time(start_time: datetime) -> OHLCOption:
    return set_field("start_time", start_time)


def ohlc_for_period(period: Period) -> OHLCOption:
    return set_field("period", period)


def ohlc_for_base_currency(currency: str) -> OHLCOption:
    return set_field("base_currency", currency)


def ohlc_for_destination_currencies(currencies: List[str]) -> OHLCOption:
    return set_field("destination_currencies", list(currencies))


def ohlc_with_pretty_print(active: bool) -> OHLCOption:
    return set_field("pretty_print", active)


class OHLCRate(BaseSchema):
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    average: float = 0.0


class OHLCResponse(BaseSchema):
    """Ответ ohlc.json: агрегаты open/high/low/close/average по валютам."""

    disclaimer: str = ""
    license: str = ""
    start_time: Optional[datetime] = PydField(default=None, strict=False)
    end_time: Optional[datetime] = PydField(default=None, strict=False)
    base: str = ""
    rates: Dict[str, OHLCRate] = PydField(default_factory=dict)


__all__ = [
    "OHLCOption",
    "OHLCParams",
    "OHLCRate",
    "OHLCResponse",
    "Period",
    "ohlc_for_base_currency",
    "ohlc_for_destination_currencies",
    "ohlc_for_period",
    "ohlc_for_start_time",
    "ohlc_with_pretty_print",
]
