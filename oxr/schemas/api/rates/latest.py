from __future__ import annotations

from typing import Dict, List

from pydantic import Field as PydField

from oxr.schemas.api.base import (
    BaseSchema,
    Option,
    RatesParamsSchema,
    format_bool,
    set_field,
)


class LatestParams(RatesParamsSchema):
    """Параметры запроса latest.json."""

    show_alternative: bool = PydField(
        default=False, description="Включать альтернативные (чёрный рынок) курсы."
    )

    def to_query(self) -> Dict[str, str]:
        query = super().to_query()
        query["show_alternative"] = format_bool(self.show_alternative)
        return query


LatestOption = Option[LatestParams]


def latest_for_base_currency(currency: str) -> LatestOption:
    return set_field("base_currency", currency)


def latest_for_destination_currencies(currencies: List[str]) -> LatestOption:
    """Ограничить ответ перечисленными валютами (symbols)."""
    return set_field("destination_currencies", list(currencies))


def latest_with_alternatives(active: bool) -> LatestOption:
    return set_field("show_alternative", active)


def latest_with_pretty_print(active: bool) -> LatestOption:
    return set_field("pretty_print", active)


class LatestRatesResponse(BaseSchema):
    """Ответ latest.json: курсы относительно base на момент timestamp."""

    disclaimer: str = ""
    license: str = ""
    timestamp: int = PydField(default=0, description="Unix-время публикации курсов.")
    base: str = ""
    rates: Dict[str, float] = PydField(default_factory=dict)


__all__ = [
    "LatestOption",
    "LatestParams",
    "LatestRatesResponse",
    "latest_for_base_currency",
    "latest_for_destination_currencies",
    "latest_with_alternatives",
    "latest_with_pretty_print",
]
