from __future__ import annotations

from typing import Any, Dict

from pydantic import ConfigDict, RootModel, model_validator

from oxr.schemas.api.base import Option, ParamsSchema, format_bool, set_field


class CurrenciesParams(ParamsSchema):
    """Параметры запроса currencies.json."""

    show_alternative: bool = False
    show_inactive: bool = False

    def to_query(self) -> Dict[str, str]:
        query = super().to_query()
        query["show_inactive"] = format_bool(self.show_inactive)
        query["show_alternative"] = format_bool(self.show_alternative)
        return query


CurrenciesOption = Option[CurrenciesParams]


def currencies_with_alternatives(active: bool) -> CurrenciesOption:
    return set_field("show_alternative", active)


def currencies_with_inactive(active: bool) -> CurrenciesOption:
    """Включать исторические (неактивные) валюты."""
    return set_field("show_inactive", active)


def currencies_with_pretty_print(active: bool) -> CurrenciesOption:
    return set_field("pretty_print", active)


class CurrenciesResponse(RootModel[Dict[str, str]]):
    """
    Справочник валют: код -> наименование.

    Тело ответа и есть этот словарь, обёртки-объекта у эндпоинта нет.
    """

    model_config = ConfigDict(strict=True)

    @model_validator(mode="before")
    @classmethod
    def _null_as_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @property
    def currencies(self) -> Dict[str, str]:
        return self.root


__all__ = [
    "CurrenciesOption",
    "CurrenciesParams",
    "CurrenciesResponse",
    "currencies_with_alternatives",
    "currencies_with_inactive",
    "currencies_with_pretty_print",
]
