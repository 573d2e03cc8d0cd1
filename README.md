# qtlabs

Three small console programs, installed as separate commands. Their
messages are in Russian, except for the list menu, which uses Latin
transliteration.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Length converter

```
qtlabs-length VALUE UNIT [--to-metric] [--log FILE]
```

`VALUE` must be a positive whole number that fits in 16 bits (1 to
32767). `UNIT` is one of `дюймы`, `футы`, `ярды`, `мили` or
`морские мили`. You can also give the enum name, in any case: `inches`,
`feet`, `yards`, `miles` or `nautical_miles`.

- By default the value is taken as metres and converted to the chosen
  unit. Inches, feet and yards are shown with 2 decimals. Miles and
  nautical miles are shown with 4.
- With `--to-metric`, the value is taken in the chosen unit and
  converted to metres, shown with 4 decimals.

The command prints `Результат: ...`. It then appends a line
`Ввод: VALUE → RESULT` to the log file, which is `log.txt` unless you
give `--log`. If the log file cannot be written, the command carries on
without it. Bad input prints an error and exits with status 1.

From Python:

```python
from qtlabs.lengthconv import Direction, Unit, convert, parse_length

value = parse_length("5")
print(convert(value, Unit.FEET, Direction.TO_METRIC))   # 1.5240 м
```

`parse_length` and `Unit.from_text` raise `LengthInputError`, a
subclass of `ValueError`, when the input is not acceptable.
`append_log(path, value, result)` writes one log line.

## List operations

```
qtlabs-list
```

This command starts with the list `1 1 4 9 16 25 49 64 81 100` and
reads numbered choices from standard input:

1. Print the list.
2. Delete elements, given a 1-based position and a count.
3. Insert the array `2 3 4` at a 1-based position.
4. Append the array `2 3 4`.
5. Report whether the squares of `2 3 4` (that is `4 9 16`) occur as a
   contiguous run.
6. Print the first longest non-decreasing run.
7. Print the list, then, for each element between 1 and 255, its
   leading zero bit count and its 8-bit binary form.
8. Read two numbers, replace every occurrence of the first with the
   second (both taken modulo 256), and print the list in hexadecimal.
9. Exit.

The menu also stops at the end of input.

The functions behind the menu are in `qtlabs.listops`:

- `replace_all`
- `format_list`
- `delete_elements`
- `insert_elements`
- `search_squares`
- `sorted_prefix_end`
- `longest_sorted_run`
- `leading_zero_bits`
- `byte_report`
- `run_menu(values, stdin, stdout)`, which runs the menu over any text
  streams and returns the list as it stands afterwards.

## Pharmacy stock

```
qtlabs-pharmacy [--dir DIR] [--drugs FILE] [--prices FILE] [--output FILE] [--date MM.YYYY]
```

Each run goes through these steps and prints each stage:

1. Write the sample files `F1.bin` (drugs) and `F2.bin` (prices) into
   `--dir`, which defaults to the current directory. Existing files are
   overwritten.
2. Load the drug and price files. These default to the samples just
   written.
3. Merge them on name and expiry date:
   - a drug gets a price of 0 and a count of 10, unless a matching price
     is found;
   - a price with no matching drug becomes a record with section
     `Unknown` and a count of 20.
4. Sort the records by name in descending order.
5. Save the records to `--output`, which defaults to `Med_result.bin` in
   `--dir`. A text copy is written next to it: a `.bin` suffix is
   replaced by `.txt`, and any other name gets `.txt` appended.
6. With `--date`, list the records whose expiry month is earlier than
   the given one. The date must be exactly `mm.yyyy` with a month from
   01 to 12. Otherwise the command exits with status 1.

From Python:

```python
from qtlabs.pharmacy import (
    find_expired, initial_drugs, initial_prices, merge, parse_month_year, sort_meds,
)

meds = sort_meds(merge(initial_drugs(), initial_prices()))
month, year = parse_month_year("01.2024")
for med in find_expired(meds, month, year):
    print(med.name, med.date)
```

`qtlabs.pharmacy` also provides the following:

- `create_initial_files`
- `load_drugs`
- `load_prices`
- `save_results`
- `format_drug`, `format_price` and `format_med`
- `DateInputError`, raised by `parse_month_year`

## Record format

`qtlabs.records` defines the dataclasses `Drug`, `Price` and `Med`.
They are stored in a big-endian binary form:

- a 32-bit record count;
- then each record, field by field;
- strings as a 32-bit byte length followed by UTF-16BE text, with
  `0xFFFFFFFF` read as an empty string;
- prices as 64-bit doubles;
- counts as 32-bit integers.

The module provides these functions:

- `write_records(stream, records)` and `read_records(stream, record_type)`
- `write_string` and `read_string`
- `Med.to_text()`, which gives one `name;date;section;price;count` line
- `format_meds_text`, which gives the text form of a sequence of `Med`
  records

Truncated or malformed data raises `RecordFormatError`.

## What it does not do

There is no graphical interface. Each program is a console command:

- the length converter takes its input as arguments;
- the pharmacy steps run in one pass, with files chosen by options
  rather than picked in a dialog.