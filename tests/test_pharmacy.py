import pytest

from qtlabs.pharmacy import (
    DateInputError,
    create_initial_files,
    find_expired,
    format_drug,
    format_med,
    format_price,
    initial_drugs,
    initial_prices,
    load_drugs,
    load_prices,
    main,
    merge,
    parse_month_year,
    save_results,
    sort_meds,
)
from qtlabs.records import Drug, Med, Price, format_meds_text, read_records


def _merged():
    return merge(initial_drugs(), initial_prices())


def test_initial_data_values():
    drugs = initial_drugs()
    prices = initial_prices()
    assert drugs[0] == Drug("Aspirin", "12.2024", "Painkiller")
    assert drugs[-1] == Drug("Alphabet", "11.2019", "Vitamin")
    assert prices[2] == Price("Loratadine", "01.2026", 120.00)


def test_create_and_load_round_trip(tmp_path):
    drug_path, price_path = create_initial_files(tmp_path)
    assert drug_path.name == "F1.bin"
    assert price_path.name == "F2.bin"
    assert load_drugs(drug_path) == initial_drugs()
    assert load_prices(price_path) == initial_prices()


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_drugs(tmp_path / "absent.bin")


def test_merge_matches_price_to_drug():
    meds = {med.name: med for med in _merged()}
    assert meds["Aspirin"] == Med("Aspirin", "12.2024", "Painkiller", 50.75, 10)
    assert meds["Alphabet"].price == 20.30


def test_merge_drug_without_price():
    meds = {med.name: med for med in _merged()}
    assert meds["Ibuprofen"] == Med("Ibuprofen", "08.2025", "Painkiller", 0.0, 10)


def test_merge_price_without_drug():
    meds = {med.name: med for med in _merged()}
    assert meds["Loratadine"] == Med("Loratadine", "01.2026", "Unknown", 120.00, 20)


def test_merge_names_are_union():
    names = {med.name for med in _merged()}
    expected = {d.name for d in initial_drugs()} | {p.name for p in initial_prices()}
    assert names == expected
    assert len(_merged()) == len(expected)


def test_merge_keys_on_date_too():
    meds = merge([Drug("A", "01.2020", "S")], [Price("A", "02.2020", 5.0)])
    assert [(m.date, m.section, m.count) for m in meds] == [
        ("01.2020", "S", 10),
        ("02.2020", "Unknown", 20),
    ]


def test_sort_meds_descending():
    ordered = sort_meds(_merged())
    names = [med.name for med in ordered]
    assert names == sorted(names, reverse=True)
    assert len(ordered) == len(_merged())


def test_save_results_writes_both_files(tmp_path):
    meds = sort_meds(_merged())
    bin_path, txt_path = save_results(meds, tmp_path / "out.bin")
    assert txt_path == tmp_path / "out.txt"
    with open(bin_path, "rb") as stream:
        assert read_records(stream, Med) == meds
    assert txt_path.read_text(encoding="utf-8") == format_meds_text(meds)


def test_save_results_other_suffix(tmp_path):
    _, txt_path = save_results([], tmp_path / "out.dat")
    assert txt_path == tmp_path / "out.dat.txt"
    assert txt_path.read_text(encoding="utf-8") == ""


def test_parse_month_year_valid():
    assert parse_month_year("05.2024") == (5, 2024)


@pytest.mark.parametrize("text", ["2024", "01.02.2024", "5.2024", "ab.2024", "05.24", "13.2024", "00.2024"])
def test_parse_month_year_invalid(text):
    with pytest.raises(DateInputError):
        parse_month_year(text)


def test_find_expired_on_sample():
    expired = find_expired(sort_meds(_merged()), 1, 2024)
    assert sorted(med.name for med in expired) == [
        "Alphabet",
        "Amoxicillin",
        "Cufrex",
        "Paracetamol",
    ]


def test_find_expired_same_year_compares_month():
    meds = [Med("A", "05.2024"), Med("B", "06.2024")]
    assert [m.name for m in find_expired(meds, 6, 2024)] == ["A"]


def test_find_expired_skips_bad_dates():
    meds = [Med("A", "bad"), Med("B", "xx.2000"), Med("C", "01.2000")]
    assert [m.name for m in find_expired(meds, 1, 2024)] == ["C"]


def test_find_expired_none():
    assert find_expired(_merged(), 1, 1900) == []


def test_format_drug():
    assert format_drug(Drug("Aspirin", "12.2024", "Painkiller")) == (
        "Название: Aspirin        , Срок: 12.2024   , Секция: Painkiller"
    )


def test_format_price_and_med_contents():
    price_line = format_price(Price("Aspirin", "12.2024", 30.0))
    assert price_line.endswith("Цена: 30")
    med_line = format_med(Med("Aspirin", "12.2024", "Painkiller", 50.75, 10))
    assert med_line.endswith("Цена: 50.75, Кол-во: 10")
    assert med_line.startswith("Название: Aspirin")


def test_main_runs_full_workflow(tmp_path, capsys):
    assert main(["--dir", str(tmp_path), "--date", "01.2024"]) == 0
    output = capsys.readouterr().out
    assert "Найдено: Cufrex" in output
    assert (tmp_path / "Med_result.bin").exists()
    text = (tmp_path / "Med_result.txt").read_text(encoding="utf-8")
    assert text == format_meds_text(sort_meds(_merged()))


def test_main_rejects_bad_date(tmp_path):
    assert main(["--dir", str(tmp_path), "--date", "13.2024"]) == 1


def test_main_missing_input(tmp_path):
    assert main(["--dir", str(tmp_path), "--drugs", str(tmp_path / "none.bin")]) == 1