"""Merging, sorting, saving and searching medicine records."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from pathlib import Path

from qtlabs.records import (
    Drug,
    Med,
    Price,
    format_meds_text,
    read_records,
    write_records,
)

DRUG_FILE = "F1.bin"
PRICE_FILE = "F2.bin"
RESULT_FILE = "Med_result.bin"

_DRUG_COUNT = 10
_PRICE_ONLY_COUNT = 20
_UNKNOWN_SECTION = "Unknown"
_INTEGER = re.compile(r"\s*[+-]?\d+\s*")


class DateInputError(ValueError):
    """Raised when a date is not given as mm.yyyy."""


def initial_drugs() -> list[Drug]:
    """The drug records the sample file starts with."""
    return [
        Drug("Aspirin", "12.2024", "Painkiller"),
        Drug("Paracetamol", "10.2023", "Painkiller"),
        Drug("Ibuprofen", "08.2025", "Painkiller"),
        Drug("Amoxicillin", "05.2023", "Antibiotic"),
        Drug("Cufrex", "10.2022", "Medicine"),
        Drug("Alphabet", "11.2019", "Vitamin"),
    ]


def initial_prices() -> list[Price]:
    """The price records the sample file starts with."""
    return [
        Price("Aspirin", "12.2024", 50.75),
        Price("Paracetamol", "10.2023", 30.00),
        Price("Loratadine", "01.2026", 120.00),
        Price("Multivitamin", "05.2024", 200.00),
        Price("Alphabet", "11.2019", 20.30),
    ]


def create_initial_files(directory: str | Path = ".") -> tuple[Path, Path]:
    """Write the sample drug and price files; return their paths."""
    base = Path(directory)
    drug_path = base / DRUG_FILE
    price_path = base / PRICE_FILE
    with open(drug_path, "wb") as stream:
        write_records(stream, initial_drugs())
    with open(price_path, "wb") as stream:
        write_records(stream, initial_prices())
    return drug_path, price_path


def load_drugs(path: str | Path) -> list[Drug]:
    """Read drug records from a binary file."""
    with open(path, "rb") as stream:
        return read_records(stream, Drug)


def load_prices(path: str | Path) -> list[Price]:
    """Read price records from a binary file."""
    with open(path, "rb") as stream:
        return read_records(stream, Price)


def merge(drugs: Iterable[Drug], prices: Iterable[Price]) -> list[Med]:
    """Join drugs and prices on name and expiry date."""
    merged: dict[tuple[str, str], Med] = {}
    for drug in drugs:
        merged[(drug.name, drug.date)] = Med(
            drug.name, drug.date, drug.section, 0.0, _DRUG_COUNT
        )
    for price in prices:
        key = (price.name, price.date)
        existing = merged.get(key)
        if existing is not None:
            existing.price = price.price
        else:
            merged[key] = Med(
                price.name, price.date, _UNKNOWN_SECTION, price.price, _PRICE_ONLY_COUNT
            )
    return list(merged.values())


def sort_meds(meds: Iterable[Med]) -> list[Med]:
    """Records ordered by name, descending."""
    return sorted(meds, key=lambda med: med.name, reverse=True)


def save_results(meds: Iterable[Med], path: str | Path) -> tuple[Path, Path]:
    """Save records as binary and as text next to it; return both paths."""
    items = list(meds)
    bin_path = Path(path)
    with open(bin_path, "wb") as stream:
        write_records(stream, items)
    text_name = str(bin_path)
    if text_name.endswith(".bin"):
        text_name = text_name[:-4]
    txt_path = Path(text_name + ".txt")
    with open(txt_path, "w", encoding="utf-8") as stream:
        stream.write(format_meds_text(items))
    return bin_path, txt_path


def _to_int(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def parse_month_year(text: str) -> tuple[int, int]:
    """Parse a strict mm.yyyy date into (month, year)."""
    parts = text.split(".")
    if len(parts) != 2:
        raise DateInputError("Пожалуйста, введите дату в формате мм.гггг.")
    month, year = _to_int(parts[0]), _to_int(parts[1])
    if month is None or year is None or len(parts[0]) != 2 or len(parts[1]) != 4:
        raise DateInputError("Части даты должны быть числами в формате мм.гггг.")
    if not 1 <= month <= 12:
        raise DateInputError("Некорректный месяц. Введите значение от 01 до 12.")
    return month, year


def find_expired(meds: Iterable[Med], month: int, year: int) -> list[Med]:
    """Records whose expiry month lies before the given month; bad dates are skipped."""
    expired = []
    for med in meds:
        parts = med.date.split(".")
        if len(parts) != 2:
            continue
        med_month, med_year = _to_int(parts[0]), _to_int(parts[1])
        if med_month is None or med_year is None:
            continue
        if (med_year, med_month) < (year, month):
            expired.append(med)
    return expired


def format_drug(drug: Drug) -> str:
    return f"Название: {drug.name:<15}, Срок: {drug.date:<10}, Секция: {drug.section}"


def format_price(price: Price) -> str:
    return f"Название: {price.name:<15}, Срок: {price.date:<10}, Цена: {price.price:g}"


def format_med(med: Med) -> str:
    return (
        f"Название: {med.name:<15}, Срок: {med.date:<10}, Секция: {med.section:<10}, "
        f"Цена: {med.price:g}, Кол-во: {med.count}"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pharmacy", description="Обработка лекарств")
    parser.add_argument("--dir", default=".", help="каталог для файлов-образцов")
    parser.add_argument("--drugs", help="файл Drug (*.bin)")
    parser.add_argument("--prices", help="файл Price (*.bin)")
    parser.add_argument("--output", help="файл результата (*.bin)")
    parser.add_argument("--date", help="дата поиска просроченных, мм.гггг")
    args = parser.parse_args(argv)

    directory = Path(args.dir)
    create_initial_files(directory)
    drug_path = Path(args.drugs) if args.drugs else directory / DRUG_FILE
    price_path = Path(args.prices) if args.prices else directory / PRICE_FILE
    output = Path(args.output) if args.output else directory / RESULT_FILE

    date = None
    if args.date is not None:
        try:
            date = parse_month_year(args.date)
        except DateInputError as error:
            print(f"Ошибка ввода: {error}", file=sys.stderr)
            return 1

    try:
        drugs = load_drugs(drug_path)
        prices = load_prices(price_path)
    except OSError as error:
        print(f"Ошибка: Не удалось открыть файл: {error}", file=sys.stderr)
        return 1

    print("--- Загружен массив Drug ---")
    for drug in drugs:
        print(format_drug(drug))
    print("\n--- Загружен массив Price ---")
    for price in prices:
        print(format_price(price))

    meds = merge(drugs, prices)
    print("\n--- б) Объединенный массив Med ---")
    for med in meds:
        print(format_med(med))

    meds = sort_meds(meds)
    print("\n--- в) Массив Med отсортирован ---")
    for med in meds:
        print(format_med(med))

    bin_path, txt_path = save_results(meds, output)
    print(f"\n--- г) Результат сохранен в бинарный файл: {bin_path}")
    print(f"--- г) Результат сохранен в текстовый файл: {txt_path}")

    if date is not None:
        month, year = date
        print(f"\n--- д) Поиск просроченных лекарств на {args.date} ---")
        expired = find_expired(meds, month, year)
        if not expired:
            print("Просроченных лекарств не найдено.")
            print(f"Поиск на {args.date} завершен. Просроченных нет.")
        else:
            for med in expired:
                print(f"Найдено: {med.name:<15}, срок истек: {med.date}")
            print(f"Поиск на {args.date} завершен. Найдено {len(expired)} шт.")
    return 0


if __name__ == "__main__":
    sys.exit(main())