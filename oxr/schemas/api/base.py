"""Базовые схемы API Open Exchange Rates."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable, Dict, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field as PydField, model_validator


ZERO_DATE = date.min
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class BaseSchema(BaseModel):
    """
    Базовая модель ответа.

    Неизвестные поля игнорируются, отсутствующие получают нулевое значение,
    а несовпадение типов (строка вместо числа и т.п.) — ошибка валидации.
    """

    model_config = ConfigDict(extra="ignore", strict=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null в JSON — то же, что отсутствующее поле: остаётся значение по умолчанию
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ParamsSchema(BaseModel):
    """
    Параметры одного запроса. Создаются заново на каждый вызов и
    заполняются опциями по порядку (последняя запись побеждает).
    Значения не валидируются: это делает сервис.
    """

    model_config = ConfigDict(extra="forbid")

    pretty_print: bool = PydField(
        default=False, description="Форматированный JSON в ответе (prettyprint)."
    )

    def to_query(self) -> Dict[str, str]:
        return {"prettyprint": format_bool(self.pretty_print)}


class RatesParamsSchema(ParamsSchema):
    """Общие поля эндпоинтов, возвращающих курсы."""

    base_currency: str = PydField(
        default="", description="Базовая валюта; пустая строка — не передаётся."
    )
    destination_currencies: List[str] = PydField(
        default_factory=list,
        description="Целевые валюты (symbols); пустой список — все валюты.",
    )

    def to_query(self) -> Dict[str, str]:
        query = super().to_query()
        if self.base_currency:
            query["base"] = self.base_currency
        symbols = ",".join(self.destination_currencies)
        if symbols:
            query["symbols"] = symbols
        return query


P = TypeVar("P", bound=ParamsSchema)
Option = Callable[[P], None]


def set_field(field: str, value: Any) -> Callable[[Any], None]:
    """Опция, записывающая value в поле field записи параметров."""

    def apply(params: Any) -> None:
        setattr(params, field, value)

    return apply


def apply_options(params: P, options) -> P:
    for option in options:
        option(params)
    return params


# ------------------------- форматирование -------------------------

def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_date(value: date) -> str:
    """YYYY-MM-DD; у datetime берётся только дата."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def format_rfc3339(value: datetime) -> str:
    """
    RFC 3339 с точностью до секунд: UTC -> "Z", иначе смещение "+hh:mm".
    Наивное время считается UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.replace(microsecond=0).isoformat()
    if value.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def format_amount(value: float) -> str:
    """
    Кратчайшая запись числа, как её ожидает путь convert/:
      100.12 -> "100.12", 100.0 -> "100", 1e6 -> "1e+06", 0.00001 -> "1e-05".
    Экспоненциальная форма — при порядке < -4 или >= 6.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digits_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digits_tuple)
    point = len(digits) + exponent  # позиция десятичной точки
    exp10 = point - 1
    prefix = "-" if sign else ""

    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        return f"{prefix}{mantissa}e{'-' if exp10 < 0 else '+'}{abs(exp10):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


__all__ = [
    "BaseSchema",
    "Option",
    "ParamsSchema",
    "RatesParamsSchema",
    "ZERO_DATE",
    "ZERO_TIME",
    "apply_options",
    "format_amount",
    "format_bool",
    "format_date",
    "format_rfc3339",
    "set_field",
]
