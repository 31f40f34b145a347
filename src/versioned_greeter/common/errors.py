"""
Единые ошибки и коды ошибок.

Назначение:
- предсказуемые коды для HTTP-ответов и логов
- единый стиль исключений по проекту
"""

from __future__ import annotations

from dataclasses import dataclass


class ErrCode:
    UNKNOWN = "unknown"
    DECODE_ERROR = "decode_error"
    UNSUPPORTED_VERSION = "unsupported_version"


@dataclass
class AppError(Exception):
    """
    Базовая ошибка приложения.
    - code: стабильный код ошибки
    - message: безопасное сообщение (уходит клиенту как есть)
    - details: доп. данные для логов
    """

    code: str
    message: str
    details: dict | None = None

    def __str__(self) -> str:
        return self.message


class DecodeError(AppError):
    """Тело запроса не разбирается в форму, ожидаемую для версии."""

    def __init__(self, message: str = "Ошибка декодирования", details: dict | None = None) -> None:
        super().__init__(ErrCode.DECODE_ERROR, message, details)


class UnsupportedVersionError(AppError):
    def __init__(self, message: str = "Неизвестная версия", details: dict | None = None) -> None:
        super().__init__(ErrCode.UNSUPPORTED_VERSION, message, details)
