"""
HTTP контракты приветствия (Pydantic-модели).

Назначение:
- GreetRequest: каноническая (текущая) форма запроса, с ней работает бизнес-логика
- GreetRequestV1 и далее: устаревшие формы, живут только ради старых клиентов
- GreetResponse: ответ, одинаковый для всех версий
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GreetRequest(BaseModel):
    """Текущая форма: {"name": "..."}."""

    model_config = ConfigDict(strict=True)

    name: str


class GreetRequestV1(BaseModel):
    """
    Форма v1: {"firstName": "...", "lastName": "..."}.

    Отсутствующее поле = пустая строка, валидации нет: {"firstName": "John"}
    превращается в name="John " (с пробелом в конце).
    """

    model_config = ConfigDict(strict=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")

    def to_canonical(self) -> GreetRequest:
        return GreetRequest(name=f"{self.first_name} {self.last_name}")


class GreetResponse(BaseModel):
    greeting: str

    @classmethod
    def for_request(cls, req: GreetRequest) -> GreetResponse:
        return cls(greeting=f"Hello {req.name}!")
