"""Text rendering of month grids and the command-line entry point."""

from datetime import date

import pytest

import hijri_settings
from hijri_logic import HijriDate, day_of_week, gregorian_to_hijri
from hijri_app import main
from month_view import DAY_ABBR, format_catalog, format_hijri, format_month


@pytest.fixture(autouse=True)
def no_user_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(hijri_settings, "_SETTINGS_PATH", str(tmp_path / "settings.json"))


def test_format_hijri():
    assert format_hijri(HijriDate(1446, 9, 9)) == "9 Ramadan 1446 AH"
    assert format_hijri(HijriDate(1, 1, 1)) == "1 Muharram 1 AH"


def test_month_header_and_weekdays():
    lines = format_month(1446, 9).splitlines()
    assert lines[0].strip() == "Ramadan 1446 AH"
    assert lines[1].split() == DAY_ABBR


def test_first_day_sits_under_its_weekday():
    lines = format_month(1446, 9).splitlines()
    first_row = lines[2]
    column = day_of_week(1446, 9, 1)
    assert first_row[column * 5:column * 5 + 5].replace("*", "").strip() == "1"


def test_today_and_events_marked():
    text = format_month(1446, 9, today=HijriDate(1446, 9, 1))
    assert "[ 1]*" in text
    assert "Start of Ramadan" in text
    assert "Laylat al-Qadr" in text
    assert "Today: 1 Ramadan 1446 AH  (day 237)" in text


def test_category_filter_hides_events():
    text = format_month(1446, 9, categories=["historical"])
    assert "*" not in text
    assert "Start of Ramadan" not in text


def test_month_without_events_has_no_legend():
    text = format_month(1446, 2)
    assert "(" not in text
    assert "Safar 1446 AH" in text


def test_format_catalog():
    lines = format_catalog().splitlines()
    assert len(lines) == 12
    assert "Islamic New Year" in lines[0]
    assert len(format_catalog(["obligatory"]).splitlines()) == 3


def test_cli_prints_requested_month(capsys):
    main(["--date", "2025-03-20", "--month", "1446", "10"])
    out = capsys.readouterr().out
    assert "Shawwal 1446 AH" in out
    assert "Eid al-Fitr" in out


def test_cli_defaults_to_month_of_given_date(capsys):
    main(["--date", "2025-03-20"])
    out = capsys.readouterr().out
    today = gregorian_to_hijri(date(2025, 3, 20))
    assert f"Today: {format_hijri(today)}" in out


def test_cli_lists_events(capsys):
    main(["--events"])
    assert len(capsys.readouterr().out.strip().splitlines()) == 12


@pytest.mark.parametrize("argv", [
    ["--month", "1446", "13"],
    ["--month", "0", "1"],
    ["--date", "20-03-2025"],
])
def test_cli_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_cli_prints_month_past_gregorian_range(capsys):
    main(["--date", "2025-03-20", "--month", "10000", "1"])
    out = capsys.readouterr().out
    assert "Muharram 10000 AH" in out
    assert "Islamic New Year" in out
