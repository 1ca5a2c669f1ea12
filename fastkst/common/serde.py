from __future__ import annotations

from typing import Any, Callable

import orjson
from pydantic import BaseModel

JSONDefault = Callable[[Any], Any]

_INT64_MIN = -(1 << 63)
_UINT64_MAX = (1 << 64) - 1


def default_json_encoder(obj: Any) -> Any:
    """JSON 직렬화 헬퍼.

    - pydantic 모델 -> dict (JSON 모드)
    - 그 외: str
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    return str(obj)


def _stringify_wide_ints(value: Any) -> Any:
    """orjson이 표현하지 못하는 64-bit 초과 정수를 문자열로 치환"""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and not _INT64_MIN <= value <= _UINT64_MAX:
        return str(value)
    if isinstance(value, dict):
        return {k: _stringify_wide_ints(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_stringify_wide_ints(v) for v in value]
    return value


def to_bytes(value: Any, default: JSONDefault | None = default_json_encoder) -> bytes:
    """객체를 UTF-8 JSON bytes(orjson)로 직렬화.

    - pydantic 모델은 model_dump(mode="json") 결과를 직렬화
    - 64-bit 범위를 넘는 정수는 문자열로 폴백
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    try:
        return orjson.dumps(value, default=default)
    except orjson.JSONEncodeError:
        return orjson.dumps(_stringify_wide_ints(value), default=default)


def to_text(value: Any) -> str:
    return to_bytes(value).decode("utf-8")
