"""Length conversion between metres and imperial units."""

from __future__ import annotations

import argparse
import re
import sys
from enum import Enum
from pathlib import Path

_SHORT_MIN = -32768
_SHORT_MAX = 32767
_INTEGER = re.compile(r"\s*[+-]?\d+\s*")


class Direction(Enum):
    """Which way a length is converted."""

    TO_IMPERIAL = "imperial"
    TO_METRIC = "metric"


class Unit(Enum):
    """Imperial units with their size in metres and display details."""

    INCHES = ("дюймы", 0.0254, 2, "дюймов")
    FEET = ("футы", 0.3048, 2, "футов")
    YARDS = ("ярды", 0.9144, 2, "ярдов")
    MILES = ("мили", 1609.34, 4, "миль")
    NAUTICAL_MILES = ("морские мили", 1852.0, 4, "морских миль")

    def __init__(self, label: str, metres: float, imperial_digits: int, plural: str) -> None:
        self.label = label
        self.metres = metres
        self.imperial_digits = imperial_digits
        self.plural = plural

    @classmethod
    def from_text(cls, text: str) -> Unit:
        """Look a unit up by its label or its name."""
        wanted = text.strip()
        for unit in cls:
            if wanted == unit.label or wanted.upper() == unit.name:
                return unit
        raise LengthInputError(f"Неизвестная единица измерения: {text}")


class LengthInputError(ValueError):
    """Raised when the entered length or unit is not acceptable."""


def parse_length(text: str) -> int:
    """Parse a positive 16-bit integer length."""
    if not _INTEGER.fullmatch(text):
        raise LengthInputError("Введите положительное целое число.")
    value = int(text)
    if not _SHORT_MIN <= value <= _SHORT_MAX or value <= 0:
        raise LengthInputError("Введите положительное целое число.")
    return value


def convert(value: int, unit: Unit, direction: Direction) -> str:
    """Convert a length and return the formatted result with its unit."""
    if direction is Direction.TO_IMPERIAL:
        return f"{value / unit.metres:.{unit.imperial_digits}f} {unit.plural}"
    return f"{value * unit.metres:.4f} м"


def append_log(path: str | Path, value: int, result: str) -> None:
    """Append one conversion record to the log file."""
    with open(path, "a", encoding="utf-8") as log:
        log.write(f"Ввод: {value} → {result}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lengthconv", description="Конвертер длины")
    parser.add_argument("value", help="длина, положительное целое число")
    parser.add_argument(
        "unit",
        help="единица измерения: " + ", ".join(unit.label for unit in Unit),
    )
    parser.add_argument(
        "--to-metric",
        action="store_true",
        help="Англ. → Метрич. (по умолчанию Метрич. → Англ.)",
    )
    parser.add_argument("--log", default="log.txt", help="файл журнала")
    args = parser.parse_args(argv)

    try:
        value = parse_length(args.value)
        unit = Unit.from_text(args.unit)
    except LengthInputError as error:
        print(f"Ошибка: {error}", file=sys.stderr)
        return 1

    direction = Direction.TO_METRIC if args.to_metric else Direction.TO_IMPERIAL
    result = convert(value, unit, direction)
    print(f"Результат: {result}")
    try:
        append_log(args.log, value, result)
    except OSError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())