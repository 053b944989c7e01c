from __future__ import annotations

from pydantic import Field as PydField

from oxr.schemas.api.base import BaseSchema, Option, ParamsSchema, set_field


class UsageParams(ParamsSchema):
    """У usage.json из параметров только prettyprint."""


UsageOption = Option[UsageParams]


def usage_with_pretty_print(active: bool) -> UsageOption:
    return set_field("pretty_print", active)


class UsageDataPlanFeatures(BaseSchema):
    """Возможности тарифа."""

    base: bool = False
    symbols: bool = False
    experimental: bool = False
    time_series: bool = PydField(default=False, alias="time-series")
    convert: bool = False


class UsageDataPlan(BaseSchema):
    name: str = ""
    quota: str = ""
    update_frequency: str = ""
    features: UsageDataPlanFeatures = PydField(default_factory=UsageDataPlanFeatures)


class DataUsage(BaseSchema):
    """Статистика запросов за текущий расчётный период."""

    requests: int = 0
    requests_quota: int = 0
    requests_remaining: int = 0
    days_elapsed: int = 0
    days_remaining: int = 0
    daily_average: int = 0


class UsageData(BaseSchema):
    app_id: str = ""
    status: str = ""
    plan: UsageDataPlan = PydField(default_factory=UsageDataPlan)
    usage: DataUsage = PydField(default_factory=DataUsage)


class UsageResponse(BaseSchema):
    """Ответ usage.json: тариф и расход квоты для App ID."""

    status: int = 0
    data: UsageData = PydField(default_factory=UsageData)


__all__ = [
    "DataUsage",
    "UsageData",
    "UsageDataPlan",
    "UsageDataPlanFeatures",
    "UsageOption",
    "UsageParams",
    "UsageResponse",
    "usage_with_pretty_print",
]
