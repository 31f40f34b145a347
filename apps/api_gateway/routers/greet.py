from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse

from versioned_greeter.common.config import get_settings
from versioned_greeter.common.errors import DecodeError, UnsupportedVersionError
from versioned_greeter.common.logging import get_project_logger
from versioned_greeter.common.metrics import record_decode_result
from versioned_greeter.contracts.greet import GreetResponse
from versioned_greeter.versioning.decoder import DEFAULT_DECODER, decode_greet_request

router = APIRouter()
log = get_project_logger()


def _plain_error(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


@router.post(
    "/{version}/greet",
    response_model=GreetResponse,
    responses={400: {"description": "decode_error"}, 404: {"description": "unsupported_version"}},
)
async def greet(version: str, request: Request):
    if get_settings().greet_strict_versions and not DEFAULT_DECODER.is_known(version):
        err = UnsupportedVersionError(
            f"unsupported version {version!r}",
            details={"known": DEFAULT_DECODER.versions()},
        )
        log.warning(
            "greet_unsupported_version",
            extra={"payload": {"version": version, **(err.details or {})}},
        )
        return _plain_error(status.HTTP_404_NOT_FOUND, err.message)

    adapter = DEFAULT_DECODER.adapter_name(version)
    body = await request.body()
    try:
        req = decode_greet_request(version, body)
    except DecodeError as e:
        record_decode_result(adapter=adapter, ok=False)
        log.warning(
            "greet_decode_failed",
            extra={"payload": {"version": version, "adapter": adapter, "error": e.message[:200]}},
        )
        return _plain_error(status.HTTP_400_BAD_REQUEST, e.message)

    record_decode_result(adapter=adapter, ok=True)
    return GreetResponse.for_request(req)
