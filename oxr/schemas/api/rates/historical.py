from __future__ import annotations

import datetime as dt
from typing import Dict, List

from pydantic import Field as PydField

from oxr.schemas.api.base import (
    ZERO_DATE,
    Option,
    RatesParamsSchema,
    format_bool,
    format_date,
    set_field,
)
from oxr.schemas.api.rates.latest import LatestRatesResponse


class HistoricalParams(RatesParamsSchema):
    """Параметры запроса historical/{date}.json. Дата уходит в путь."""

    date: dt.date = PydField(default=ZERO_DATE, description="Дата курсов.")
    show_alternative: bool = False

    def path(self) -> str:
        return f"historical/{format_date(self.date)}.json"

    def to_query(self) -> Dict[str, str]:
        query = super().to_query()
        query["show_alternative"] = format_bool(self.show_alternative)
        return query


HistoricalOption = Option[HistoricalParams]


def historical_for_date(date: dt.date) -> HistoricalOption:
    return set_field("date", date)


def historical_for_base_currency(currency: str) -> HistoricalOption:
    return set_field("base_currency", currency)


def historical_for_destination_currencies(currencies: List[str]) -> HistoricalOption:
    return set_field("destination_currencies", list(currencies))


def historical_with_alternatives(active: bool) -> HistoricalOption:
    return set_field("show_alternative", active)


def historical_with_pretty_print(active: bool) -> HistoricalOption:
    return set_field("pretty_print", active)


class HistoricalRatesResponse(LatestRatesResponse):
    """Ответ historical/*.json — та же структура, что и у latest.json."""


__all__ = [
    "HistoricalOption",
    "HistoricalParams",
    "HistoricalRatesResponse",
    "historical_for_base_currency",
    "historical_for_date",
    "historical_for_destination_currencies",
    "historical_with_alternatives",
    "historical_with_pretty_print",
]
