# oxr/core/api/errors.py
from __future__ import annotations


class OXRError(Exception):
    """Базовая ошибка клиента Open Exchange Rates."""


class BadResponseError(OXRError):
    """
    Сервис ответил статусом, отличным от 200.

    Статус проверяется до разбора тела; конкретная семантика 4xx/5xx
    не различается.
    """

    def __init__(self, status_code: int, url: str = "") -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(
            f"status received: {status_code}: failed to receive successful response"
        )


class DecodeError(OXRError):
    """Тело ответа не JSON или не совпадает со схемой ответа."""

    def __init__(self, model_name: str, detail: str = "") -> None:
        self.model_name = model_name
        self.detail = detail
        message = f"failed to decode response into {model_name}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


__all__ = ["BadResponseError", "DecodeError", "OXRError"]
