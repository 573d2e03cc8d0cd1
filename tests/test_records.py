import io

import pytest

from qtlabs.records import (
    Drug,
    Med,
    Price,
    RecordFormatError,
    format_meds_text,
    read_records,
    read_string,
    write_records,
    write_string,
)


def _written(write, *args):
    buffer = io.BytesIO()
    write(buffer, *args)
    return buffer.getvalue()


def test_write_string_wire_bytes():
    buffer = io.BytesIO()
    write_string(buffer, "A")
    assert buffer.getvalue() == b"\x00\x00\x00\x02\x00A"


def test_write_empty_string_has_zero_length():
    buffer = io.BytesIO()
    write_string(buffer, "")
    assert buffer.getvalue() == b"\x00\x00\x00\x00"


@pytest.mark.parametrize("text", ["Aspirin", "Загрузка", "", "12.2024", "\U0001f48a"])
def test_string_round_trip(text):
    assert read_string(io.BytesIO(_written(write_string, text))) == text


def test_null_string_marker_reads_empty():
    assert read_string(io.BytesIO(b"\xff\xff\xff\xff")) == ""


def test_truncated_string_raises():
    with pytest.raises(RecordFormatError):
        read_string(io.BytesIO(b"\x00\x00\x00\x04\x00A"))


def test_odd_length_string_raises():
    with pytest.raises(RecordFormatError):
        read_string(io.BytesIO(b"\x00\x00\x00\x01A"))


def test_empty_record_list_wire_bytes():
    buffer = io.BytesIO()
    write_records(buffer, [])
    assert buffer.getvalue() == b"\x00\x00\x00\x00"


def test_drug_list_round_trip():
    drugs = [
        Drug("Aspirin", "12.2024", "Painkiller"),
        Drug("Amoxicillin", "05.2023", "Antibiotic"),
    ]
    data = _written(write_records, drugs)
    assert read_records(io.BytesIO(data), Drug) == drugs


def test_price_list_round_trip():
    prices = [Price("Aspirin", "12.2024", 50.75), Price("Alphabet", "11.2019", 20.30)]
    data = _written(write_records, prices)
    assert read_records(io.BytesIO(data), Price) == prices


def test_med_list_round_trip():
    meds = [
        Med("Aspirin", "12.2024", "Painkiller", 50.75, 10),
        Med("Loratadine", "01.2026", "Unknown", 120.0, 20),
    ]
    data = _written(write_records, meds)
    assert read_records(io.BytesIO(data), Med) == meds


def test_price_wire_layout_ends_with_double():
    data = _written(Price("A", "B", 1.0).write_to)
    assert data[-8:] == b"\x3f\xf0\x00\x00\x00\x00\x00\x00"
    assert len(data) == 6 + 6 + 8


def test_med_count_is_last_int32():
    data = _written(Med("", "", "", 0.0, 10).write_to)
    assert data[-4:] == b"\x00\x00\x00\x0a"


def test_negative_count_reads_nothing():
    assert read_records(io.BytesIO(b"\xff\xff\xff\xff"), Drug) == []


def test_truncated_records_raise():
    data = _written(write_records, [Drug("Aspirin", "12.2024", "Painkiller")])
    with pytest.raises(RecordFormatError):
        read_records(io.BytesIO(data[:-3]), Drug)


def test_med_to_text():
    med = Med("Aspirin", "12.2024", "Painkiller", 50.75, 10)
    assert med.to_text() == "Aspirin;12.2024;Painkiller;50.75;10"


def test_med_to_text_whole_price_has_no_fraction():
    med = Med("Paracetamol", "10.2023", "Painkiller", 30.0, 10)
    assert med.to_text() == "Paracetamol;10.2023;Painkiller;30;10"


def test_format_meds_text_one_line_each():
    meds = [
        Med("Aspirin", "12.2024", "Painkiller", 50.75, 10),
        Med("Loratadine", "01.2026", "Unknown", 120.0, 20),
    ]
    text = format_meds_text(meds)
    assert text.splitlines() == [med.to_text() for med in meds]
    assert text.endswith("\n")


def test_format_meds_text_empty():
    assert format_meds_text([]) == ""