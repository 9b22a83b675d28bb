"""Compact binary envelope for date values.

Each record is one type-tag byte followed by a fixed-size big-endian payload:

- ``MONTH_DAY_TYPE`` (64): month and day as single signed bytes.
- ``LOCAL_DATE_TYPE`` (3): year as a signed 32-bit int, then month and day bytes.

Decoding always rebuilds values through the validating domain factories.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from calendrical.domain import CalendricalError, LocalDate, MonthDay

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import BinaryIO

log = logging.getLogger(__name__)

LOCAL_DATE_TYPE: Final[int] = 3
MONTH_DAY_TYPE: Final[int] = 64

type Serializable = MonthDay | LocalDate


class SerializationError(CalendricalError):
    """Raised when bytes do not form a valid record."""


@dataclass(frozen=True, slots=True)
class _Codec:
    tag: int
    value_type: type[Any]
    layout: struct.Struct
    fields: Callable[[Any], tuple[int, ...]]
    factory: Callable[..., Any]


_CODECS: Final[tuple[_Codec, ...]] = (
    _Codec(
        tag=MONTH_DAY_TYPE,
        value_type=MonthDay,
        layout=struct.Struct(">bb"),
        fields=MonthDay.serialize_fields,
        factory=MonthDay.deserialize,
    ),
    _Codec(
        tag=LOCAL_DATE_TYPE,
        value_type=LocalDate,
        layout=struct.Struct(">ibb"),
        fields=lambda value: (value.year, value.month, value.day),
        factory=LocalDate.of,
    ),
)
_BY_TAG: Final[dict[int, _Codec]] = {codec.tag: codec for codec in _CODECS}
_BY_TYPE: Final[dict[type[Any], _Codec]] = {codec.value_type: codec for codec in _CODECS}


def dumps(value: Serializable) -> bytes:
    codec = _BY_TYPE.get(type(value))
    if codec is None:
        raise TypeError(f"Cannot serialize values of type {type(value).__name__}")
    return bytes([codec.tag]) + codec.layout.pack(*codec.fields(value))


def loads(data: bytes) -> Serializable:
    """Decode exactly one record; trailing bytes are an error."""
    if not data:
        raise SerializationError("Empty input")
    codec = _codec_for(data[0])
    payload = data[1:]
    if len(payload) != codec.layout.size:
        raise SerializationError(
            f"Expected {codec.layout.size} payload bytes for type {codec.tag}, got {len(payload)}"
        )
    return _build(codec, codec.layout.unpack(payload))


def write(stream: BinaryIO, value: Serializable) -> None:
    stream.write(dumps(value))


def read(stream: BinaryIO) -> Serializable:
    """Read one record from ``stream``, consuming only its bytes."""
    header = stream.read(1)
    if not header:
        raise SerializationError("Unexpected end of stream")
    codec = _codec_for(header[0])
    payload = stream.read(codec.layout.size)
    if len(payload) != codec.layout.size:
        raise SerializationError("Unexpected end of stream")
    return _build(codec, codec.layout.unpack(payload))


def _codec_for(tag: int) -> _Codec:
    codec = _BY_TAG.get(tag)
    if codec is None:
        raise SerializationError(f"Unknown serialized type: {tag}")
    return codec


def _build(codec: _Codec, fields: tuple[int, ...]) -> Serializable:
    try:
        return codec.factory(*fields)
    except CalendricalError as exc:
        log.debug("Rejected serialized %s fields %s", codec.value_type.__name__, fields)
        raise SerializationError(
            f"Invalid serialized {codec.value_type.__name__}: {exc}"
        ) from exc


__all__ = [
    "LOCAL_DATE_TYPE",
    "MONTH_DAY_TYPE",
    "SerializationError",
    "dumps",
    "loads",
    "read",
    "write",
]
