"""List manipulation exercises driven by a text menu."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

INITIAL_VALUES = (1, 1, 4, 9, 16, 25, 49, 64, 81, 100)
PATTERN = (2, 3, 4)

MENU = (
    "Menu:",
    "1. Prosmotret sostoyanie spiska",
    "2. Udalit neskolko elementov s zadannoy pozizzii",
    "3. Dobavit neskolko elementov v zadannuu posiziu s massiva",
    "4. Dobavit neskolko elementov iz massiva",
    "5. Nayti v massive zelyh chisel posled, kagdyy element kotoroy raven kvadratu drugogo massiva",
    "6. Poisk naibolchego otsortirovannogo diapazona",
    "7. baytovye preabrozavaniya",
    "8. zamena",
    "9. Vyhod iz programmy",
    "Vvedite vash vybor: ",
)


def replace_all(values: list[int], old: int, new: int) -> int:
    """Replace every occurrence of old with new in place; return how many changed."""
    replaced = 0
    for index, value in enumerate(values):
        if value == old:
            values[index] = new
            replaced += 1
    return replaced


def format_list(values: Iterable[int]) -> str:
    """Join the values with single spaces."""
    return " ".join(str(value) for value in values)


def delete_elements(values: list[int], position: int, count: int) -> None:
    """Remove up to count elements starting at a zero-based position."""
    if 0 <= position < len(values) and count > 0:
        del values[position:min(position + count, len(values))]


def insert_elements(values: list[int], position: int, elements: Iterable[int]) -> None:
    """Insert elements, in order, at a zero-based position."""
    if 0 <= position <= len(values):
        values[position:position] = list(elements)


def search_squares(values: Sequence[int], pattern: Iterable[int]) -> bool:
    """Tell whether the squares of pattern occur as a contiguous run in values."""
    squares = [number * number for number in pattern]
    if not squares:
        return bool(values)
    width = len(squares)
    return any(
        list(values[start:start + width]) == squares
        for start in range(len(values) - width + 1)
    )


def sorted_prefix_end(values: Sequence[int]) -> int:
    """Index where the non-decreasing prefix of values ends."""
    for index in range(1, len(values)):
        if values[index] < values[index - 1]:
            return index
    return len(values)


def longest_sorted_run(values: Sequence[int]) -> list[int]:
    """The first longest non-decreasing contiguous run."""
    best: list[int] = []
    start = 0
    while start < len(values):
        end = start + sorted_prefix_end(values[start:])
        if end - start > len(best):
            best = list(values[start:end])
        start = end
    return best


def leading_zero_bits(byte: int) -> int:
    """Number of leading zero bits in an 8-bit value."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not an 8-bit value: {byte}")
    return 8 - byte.bit_length()


def byte_report(values: Iterable[int]) -> list[str]:
    """Describe each value that fits in a nonzero byte."""
    return [
        f"element : {value} amount of leading zero bits : "
        f"{leading_zero_bits(value)} for checking : {value:08b}"
        for value in values
        if 0 < value < 256
    ]


class _InputExhausted(Exception):
    pass


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_menu(values: list[int], stdin: TextIO, stdout: TextIO) -> list[int]:
    """Run the interactive menu over values until exit or end of input."""
    tokens = _tokens(stdin)

    def read_int() -> int:
        token = next(tokens, None)
        if token is None:
            raise _InputExhausted
        return int(token)

    def say(*lines: object) -> None:
        for line in lines:
            print(line, file=stdout)

    try:
        while True:
            say(*MENU)
            try:
                choice = read_int()
            except ValueError:
                say("Nevernyy vybor. Poprobuyte eche raz.")
                continue

            if choice == 1:
                say(f"Spisok: {format_list(values)}")
            elif choice == 2:
                say("Vvedite pozizziu dlya udaleniya: ")
                position = read_int()
                say("Vvedite kolichestvo elementov dlya udaleniya: ")
                count = read_int()
                delete_elements(values, position - 1, count)
            elif choice == 3:
                say("Vvedite pozizziu dlya vstavki: ")
                position = read_int()
                insert_elements(values, position - 1, PATTERN)
            elif choice == 4:
                values.extend(PATTERN)
            elif choice == 5:
                if search_squares(values, PATTERN):
                    say("Podposledovatelnost naydena.")
                else:
                    say("Podposledovatelnost ne naydena.")
            elif choice == 6:
                say(" ", *longest_sorted_run(values))
            elif choice == 7:
                say("list befor preobrazovaniy : ", *values)
                say("list after magic : ", *byte_report(values))
            elif choice == 8:
                say("elements what you want to replace: ")
                old = read_int()
                say("elements to what you want to replace: ")
                new = read_int()
                replace_all(values, old & 0xFF, new & 0xFF)
                say("After replace_all:", *(format(value, "x") for value in values))
            elif choice == 9:
                break
            else:
                say("Nevernyy vybor. Poprobuyte eche raz.")
    except (_InputExhausted, ValueError):
        pass
    return values


def main(argv: list[str] | None = None) -> int:
    run_menu(list(INITIAL_VALUES), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())