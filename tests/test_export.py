# tests/test_export.py
# =======================
# Acción de exportación CSV
# =======================
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from app.crud.rsvps_crud import RsvpFetchError
from app.export import CSV_COLUMNS, export_filename, export_rsvps, rsvps_to_csv
from app.schemas import ExportResult


def test_csv_has_header_and_one_line_per_rsvp(make_rsvp):
    rsvps = [
        make_rsvp("Jo", mobile="555", adults=2, kids=1, submitted_at=datetime(2026, 5, 2, 10, 0)),
        make_rsvp("Ana", mobile="777", email="ana@example.com", adults=1),
    ]
    lines = rsvps_to_csv(rsvps).splitlines()
    assert lines[0] == ",".join(CSV_COLUMNS)
    assert lines[1] == "Jo,555,,2,1,3,2026-05-02T10:00:00"
    assert lines[2].startswith("Ana,777,ana@example.com,1,0,1,")
    assert len(lines) == 3


def test_empty_list_exports_header_only():
    assert rsvps_to_csv([]) == ",".join(CSV_COLUMNS) + "\n"


def test_export_returns_data_on_success(make_rsvp):
    result = export_rsvps(loader=lambda: [make_rsvp("Jo")])
    assert result.ok
    assert result.error is None
    assert "Jo" in result.data


def test_export_returns_error_when_loading_fails():
    def broken():
        raise RsvpFetchError("network error")

    result = export_rsvps(loader=broken)
    assert not result.ok
    assert result.data is None
    assert result.error == "network error"


def test_filename_uses_iso_date():
    assert export_filename(date(2026, 5, 22)) == "rsvps_2026-05-22.csv"


def test_default_filename_matches_pattern():
    name = export_filename()
    assert name.startswith("rsvps_") and name.endswith(".csv")
    date.fromisoformat(name[len("rsvps_"):-len(".csv")])


@pytest.mark.parametrize("kwargs", [{}, {"data": "a", "error": "b"}])
def test_export_result_requires_exactly_one_outcome(kwargs):
    with pytest.raises(ValidationError):
        ExportResult(**kwargs)
