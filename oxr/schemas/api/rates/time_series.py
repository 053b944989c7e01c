from __future__ import annotations

import datetime as dt
from typing import Dict, List

from pydantic import Field as PydField

from oxr.schemas.api.base import (
    ZERO_DATE,
    BaseSchema,
    Option,
    RatesParamsSchema,
    format_bool,
    format_date,
    set_field,
)


class TimeSeriesParams(RatesParamsSchema):
    """
    Параметры запроса time-series.json.

    start/end отправляются всегда, даже не заданные (0001-01-01):
    границы периода обязательны для сервиса.
    """

    start_date: dt.date = PydField(default=ZERO_DATE, description="Начало периода.")
    end_date: dt.date = PydField(default=ZERO_DATE, description="Конец периода.")
    show_alternative: bool = False

    def to_query(self) -> Dict[str, str]:
        query = super().to_query()
        query["show_alternative"] = format_bool(self.show_alternative)
        query["start"] = format_date(self.start_date)
        query["end"] = format_date(self.end_date)
        return query


TimeSeriesOption = Option[TimeSeriesParams]


def time_series_for_start_date(start: dt.date) -> TimeSeriesOption:
    return set_field("start_date", start)


def time_series_for_end_date(end: dt.date) -> TimeSeriesOption:
    return set_field("end_date", end)


def time_series_for_base_currency(currency: str) -> TimeSeriesOption:
    return set_field("base_currency", currency)


def time_series_for_destination_currencies(currencies: List[str]) -> TimeSeriesOption:
    return set_field("destination_currencies", list(currencies))


def time_series_with_alternatives(active: bool) -> TimeSeriesOption:
    return set_field("show_alternative", active)


def time_series_with_pretty_print(active: bool) -> TimeSeriesOption:
    return set_field("pretty_print", active)


class TimeSeriesResponse(BaseSchema):
    """Ответ time-series.json: курсы по датам (YYYY-MM-DD -> валюта -> курс)."""

    disclaimer: str = ""
    license: str = ""
    start_date: str = ""
    end_date: str = ""
    base: str = ""
    rates: Dict[str, Dict[str, float]] = PydField(default_factory=dict)


__all__ = [
    "TimeSeriesOption",
    "TimeSeriesParams",
    "TimeSeriesResponse",
    "time_series_for_base_currency",
    "time_series_for_destination_currencies",
    "time_series_for_end_date",
    "time_series_for_start_date",
    "time_series_with_alternatives",
    "time_series_with_pretty_print",
]
