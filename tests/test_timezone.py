import re
from datetime import datetime, timezone

import pytest

from algokit.timezone import date_in_timezone, main, time_in_timezone

RFC1123_PATTERN = re.compile(
    r"^(Mon|Tue|Wed|Thu|Fri|Sat|Sun), \d{2} "
    r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec) \d{4} \d{2}:\d{2}:\d{2} UTC$"
)


def _utc_dates():
    return datetime.now(timezone.utc).date()


def test_time_in_timezone_is_rfc1123_and_current():
    before = datetime.now(timezone.utc).replace(microsecond=0, tzinfo=None)
    text = time_in_timezone("UTC")
    assert RFC1123_PATTERN.match(text)
    parsed = datetime.strptime(text, "%a, %d %b %Y %H:%M:%S UTC")
    assert abs((parsed - before).total_seconds()) <= 5


def test_unknown_timezone_raises():
    with pytest.raises(ValueError):
        time_in_timezone("Nowhere/Bogus")
    with pytest.raises(ValueError):
        date_in_timezone("Nowhere/Bogus")


def test_default_date_is_iso():
    before = _utc_dates()
    result = date_in_timezone("UTC")
    after = _utc_dates()
    assert result in {before.isoformat(), after.isoformat()}


def test_reference_layout_matches_default():
    before = _utc_dates()
    result = date_in_timezone("UTC", "2006-01-02")
    after = _utc_dates()
    assert result in {before.isoformat(), after.isoformat()}


def test_month_name_layout_round_trips():
    before = _utc_dates()
    result = date_in_timezone("UTC", "Jan 2, 2006")
    after = _utc_dates()
    assert datetime.strptime(result, "%b %d, %Y").date() in {before, after}


def test_weekday_layout():
    before = datetime.now(timezone.utc)
    result = date_in_timezone("UTC", "Monday")
    after = datetime.now(timezone.utc)
    assert result in {before.strftime("%A"), after.strftime("%A")}


def test_main_prints_date(capsys):
    before = _utc_dates()
    assert main(["timezone", "UTC"]) == 0
    after = _utc_dates()
    out = capsys.readouterr().out
    assert out in {
        f"Current date in UTC: {day.isoformat()}\n: " for day in (before, after)
    }


def test_main_with_date_layout(capsys):
    before = _utc_dates()
    assert main(["timezone", "UTC", "--date", "2006"]) == 0
    after = _utc_dates()
    out = capsys.readouterr().out
    assert out in {f"Current date in UTC: {day.year}\n: " for day in (before, after)}


def test_main_requires_exactly_one_argument():
    assert main(["timezone"]) == 1
    assert main(["timezone", "UTC", "Extra"]) == 1


def test_main_rejects_unknown_zone(capsys):
    assert main(["timezone", "Nowhere/Bogus"]) == 1
    assert "Nowhere/Bogus" in capsys.readouterr().err