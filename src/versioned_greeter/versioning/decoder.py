"""
Декодирование тела запроса по тегу версии.

Один обработчик обслуживает все версии: тег из пути выбирает адаптер,
адаптер разбирает байты в свою форму и нормализует её в GreetRequest.

Как добавить новую версию формы:
- переименовать текущую GreetRequest в GreetRequestVN (старый тег)
- дать ей to_canonical() -> новая GreetRequest
- написать адаптер decode_vN и добавить его в таблицу под старым тегом
- новая GreetRequest сама становится веткой по умолчанию

Каноническую ветку и другие адаптеры при этом трогать не нужно.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import BinaryIO, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from versioned_greeter.common.errors import DecodeError
from versioned_greeter.contracts.greet import GreetRequest, GreetRequestV1
from versioned_greeter.contracts.versions import CURRENT_GREET_VERSION, LEGACY_GREET_V1

Adapter = Callable[[bytes], GreetRequest]
Payload = bytes | bytearray | BinaryIO
ModelT = TypeVar("ModelT", bound=BaseModel)


def _format_validation_error(e: PydanticValidationError) -> str:
    parts: list[str] = []
    for err in e.errors(include_url=False):
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = str(err.get("msg", "invalid"))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or str(e)


def _parse(model: type[ModelT], payload: bytes, *, adapter: str) -> ModelT:
    try:
        return model.model_validate_json(payload)
    except PydanticValidationError as e:
        raise DecodeError(
            _format_validation_error(e),
            details={"adapter": adapter, "model": model.__name__},
        ) from e


def decode_current(payload: bytes) -> GreetRequest:
    """Текущая форма: разбираем как есть."""
    return _parse(GreetRequest, payload, adapter="current")


def decode_v1(payload: bytes) -> GreetRequest:
    """v1: {firstName, lastName} -> name = firstName + " " + lastName."""
    legacy = _parse(GreetRequestV1, payload, adapter=LEGACY_GREET_V1)
    return legacy.to_canonical()


def _read_all(payload: Payload) -> bytes:
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    return payload.read()


@dataclass(frozen=True)
class VersionDecoder:
    """
    Таблица стратегий: тег -> адаптер, всё остальное -> default.

    Неизвестный тег не ошибка, а текущая форма. Экземпляр неизменяемый,
    поэтому один объект безопасно делят конкурентные запросы.
    """

    adapters: Mapping[str, Adapter] = field(default_factory=dict)
    default: Adapter = decode_current
    current_version: str = CURRENT_GREET_VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "adapters", MappingProxyType(dict(self.adapters)))

    def adapter_for(self, version: str) -> Adapter:
        return self.adapters.get(version, self.default)

    def adapter_name(self, version: str) -> str:
        return version if version in self.adapters else "current"

    def decode(self, version: str, payload: Payload) -> GreetRequest:
        adapter = self.adapter_for(version)
        try:
            return adapter(_read_all(payload))
        except DecodeError as e:
            e.details = {**(e.details or {}), "version": version}
            raise

    def with_adapter(self, version: str, adapter: Adapter) -> VersionDecoder:
        return VersionDecoder(
            adapters={**self.adapters, version: adapter},
            default=self.default,
            current_version=self.current_version,
        )

    def is_known(self, version: str) -> bool:
        return version in self.adapters or version == self.current_version

    def versions(self) -> list[str]:
        return sorted({*self.adapters, self.current_version})


DEFAULT_DECODER = VersionDecoder(adapters={LEGACY_GREET_V1: decode_v1})


def decode_greet_request(
    version: str, payload: Payload, *, decoder: VersionDecoder = DEFAULT_DECODER
) -> GreetRequest:
    """
    Декодирует тело запроса версии `version` в каноническую GreetRequest.

    Возвращает полностью заполненную запись или бросает DecodeError;
    частично заполненная запись наружу не попадает.
    """
    return decoder.decode(version, payload)
