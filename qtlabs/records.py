"""Medicine records and their big-endian binary stream format."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass
from typing import BinaryIO, Protocol, TypeVar

_INT32 = struct.Struct(">i")
_UINT32 = struct.Struct(">I")
_DOUBLE = struct.Struct(">d")
_NULL_STRING = 0xFFFFFFFF


class RecordFormatError(ValueError):
    """Raised when a binary stream does not hold well-formed records."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) != size:
        raise RecordFormatError(f"unexpected end of stream: wanted {size} bytes")
    return data


def _write_int32(stream: BinaryIO, value: int) -> None:
    stream.write(_INT32.pack(value))


def _read_int32(stream: BinaryIO) -> int:
    return _INT32.unpack(_read_exact(stream, _INT32.size))[0]


def _write_double(stream: BinaryIO, value: float) -> None:
    stream.write(_DOUBLE.pack(value))


def _read_double(stream: BinaryIO) -> float:
    return _DOUBLE.unpack(_read_exact(stream, _DOUBLE.size))[0]


def write_string(stream: BinaryIO, text: str) -> None:
    """Write a string as a 32-bit byte length followed by UTF-16BE data."""
    encoded = text.encode("utf-16-be")
    stream.write(_UINT32.pack(len(encoded)))
    stream.write(encoded)


def read_string(stream: BinaryIO) -> str:
    """Read a string written by write_string; a null marker reads as empty."""
    length = _UINT32.unpack(_read_exact(stream, _UINT32.size))[0]
    if length == _NULL_STRING:
        return ""
    if length % 2:
        raise RecordFormatError(f"odd UTF-16 byte length: {length}")
    return _read_exact(stream, length).decode("utf-16-be")


@dataclass
class Drug:
    """A drug with its expiry date (mm.yyyy) and section."""

    name: str = ""
    date: str = ""
    section: str = ""

    def write_to(self, stream: BinaryIO) -> None:
        write_string(stream, self.name)
        write_string(stream, self.date)
        write_string(stream, self.section)

    @classmethod
    def read_from(cls, stream: BinaryIO) -> Drug:
        return cls(read_string(stream), read_string(stream), read_string(stream))


@dataclass
class Price:
    """A price for a drug with a given expiry date."""

    name: str = ""
    date: str = ""
    price: float = 0.0

    def write_to(self, stream: BinaryIO) -> None:
        write_string(stream, self.name)
        write_string(stream, self.date)
        _write_double(stream, self.price)

    @classmethod
    def read_from(cls, stream: BinaryIO) -> Price:
        return cls(read_string(stream), read_string(stream), _read_double(stream))


@dataclass
class Med:
    """A merged medicine record."""

    name: str = ""
    date: str = ""
    section: str = ""
    price: float = 0.0
    count: int = 0

    def write_to(self, stream: BinaryIO) -> None:
        write_string(stream, self.name)
        write_string(stream, self.date)
        write_string(stream, self.section)
        _write_double(stream, self.price)
        _write_int32(stream, self.count)

    @classmethod
    def read_from(cls, stream: BinaryIO) -> Med:
        return cls(
            read_string(stream),
            read_string(stream),
            read_string(stream),
            _read_double(stream),
            _read_int32(stream),
        )

    def to_text(self) -> str:
        """One semicolon-separated text line, without the newline."""
        return f"{self.name};{self.date};{self.section};{self.price:g};{self.count}"


class _Record(Protocol):
    def write_to(self, stream: BinaryIO) -> None: ...


R = TypeVar("R", Drug, Price, Med)


def write_records(stream: BinaryIO, records: Iterable[_Record]) -> None:
    """Write a 32-bit record count followed by each record."""
    items = list(records)
    _write_int32(stream, len(items))
    for record in items:
        record.write_to(stream)


def read_records(stream: BinaryIO, record_type: type[R]) -> list[R]:
    """Read records written by write_records; a non-positive count gives none."""
    count = _read_int32(stream)
    return [record_type.read_from(stream) for _ in range(max(count, 0))]


def format_meds_text(meds: Iterable[Med]) -> str:
    """Text form of the records, one line each."""
    return "".join(f"{med.to_text()}\n" for med in meds)