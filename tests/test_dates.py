import pytest

from einvoice_qr.dates import looks_like_iso_datetime, to_iso_date


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        (None, ""),
        ("2026-02-23", "2026-02-23T00:00:00+03:00"),
        ("2026-02-23 18:30", "2026-02-23T18:30:00+03:00"),
        ("2026-02-23   07:05", "2026-02-23T07:05:00+03:00"),
        ("2026-02-23T18:30:00+03:00", "2026-02-23T18:30:00+03:00"),
        ("2026-02-23T18:30", "2026-02-23T18:30"),
        ("2024-02-30", "2024-02-30T00:00:00+03:00"),
    ],
)
def test_to_iso_date(raw, expected):
    assert to_iso_date(raw) == expected


@pytest.mark.parametrize("raw", ["23/02/2026", "2026-2-23", "2026-02-23 18:30:15", "2026-02-23\n", "today"])
def test_unrecognized_input_passes_through(raw):
    assert to_iso_date(raw) == raw


def test_custom_offset():
    assert to_iso_date("2026-02-23", utc_offset="+04:00") == "2026-02-23T00:00:00+04:00"


def test_looks_like_iso_datetime():
    assert looks_like_iso_datetime("2026-02-23T18:30:00+03:00")
    assert looks_like_iso_datetime("2026-02-23T18:30:00.123Z")
    assert not looks_like_iso_datetime("2026-02-23")
    assert not looks_like_iso_datetime("T")


@pytest.mark.parametrize("separator", ["\x1c", "\x1f", "\x85"])
def test_control_separators_are_not_whitespace(separator):
    raw = f"2026-02-23{separator}18:30"
    assert to_iso_date(raw) == raw


@pytest.mark.parametrize("separator", ["\t", " ", "　"])
def test_unicode_spaces_separate_date_and_time(separator):
    assert to_iso_date(f"2026-02-23{separator}18:30") == "2026-02-23T18:30:00+03:00"
