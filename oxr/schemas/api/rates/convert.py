from __future__ import annotations

from pydantic import Field as PydField

from oxr.schemas.api.base import (
    BaseSchema,
    Option,
    ParamsSchema,
    format_amount,
    set_field,
)


class ConvertParams(ParamsSchema):
    """
    Параметры запроса convert/{value}/{from}/{to}.

    Сумма и валюты передаются в пути, в query — только app_id и prettyprint.
    """

    value: float = PydField(default=0.0, description="Конвертируемая сумма.")
    base_currency: str = PydField(default="", description="Исходная валюта.")
    destination_currency: str = PydField(default="", description="Целевая валюта.")

    def path(self) -> str:
        return (
            f"convert/{format_amount(self.value)}"
            f"/{self.base_currency}/{self.destination_currency}"
        )


ConvertOption = Option[ConvertParams]


def convert_with_value(value: float) -> ConvertOption:
    return set_field("value", value)


def convert_for_base_currency(currency: str) -> ConvertOption:
    return set_field("base_currency", currency)


def convert_for_destination_currency(currency: str) -> ConvertOption:
    return set_field("destination_currency", currency)


def convert_with_pretty_print(active: bool) -> ConvertOption:
    return set_field("pretty_print", active)


class ConversionRequest(BaseSchema):
    """Эхо запроса в ответе convert."""

    query: str = ""
    amount: float = 0.0
    from_: str = PydField(default="", alias="from")
    to: str = ""


class ConversionMeta(BaseSchema):
    timestamp: int = 0
    rate: float = 0.0


class ConversionResponse(BaseSchema):
    """Ответ convert: сумма в целевой валюте лежит в поле response."""

    disclaimer: str = ""
    license: str = ""
    request: ConversionRequest = PydField(default_factory=ConversionRequest)
    meta: ConversionMeta = PydField(default_factory=ConversionMeta)
    response: float = 0.0


__all__ = [
    "ConversionMeta",
    "ConversionRequest",
    "ConversionResponse",
    "ConvertOption",
    "ConvertParams",
    "convert_for_base_currency",
    "convert_for_destination_currency",
    "convert_with_pretty_print",
    "convert_with_value",
]
