"""Unit tests for svcgen.api.service.parse_cron module."""

import pytest

from svcgen.api.service.CronSchedule import CronSchedule
from svcgen.api.service.CronSyntaxError import CronSyntaxError
from svcgen.api.service.ServiceTypeError import ServiceTypeError
from svcgen.api.service.parse_cron import parse_cron

pytestmark = pytest.mark.service


@pytest.mark.parametrize(
    ("shortcut", "expected"),
    [
        ("@hourly", {"Minute": 0, "Hour": "*", "Day": "*", "Month": "*", "Weekday": "*"}),
        ("@daily", {"Minute": 0, "Hour": 0, "Day": "*", "Month": "*", "Weekday": "*"}),
        ("@weekly", {"Minute": 0, "Hour": 0, "Day": "*", "Month": "*", "Weekday": 0}),
        ("@monthly", {"Minute": 0, "Hour": 0, "Day": 1, "Month": "*", "Weekday": "*"}),
        ("@yearly", {"Minute": 0, "Hour": 0, "Day": 1, "Month": 1, "Weekday": "*"}),
        ("@annually", {"Minute": 0, "Hour": 0, "Day": 1, "Month": 1, "Weekday": "*"}),
    ],
)
def test_parse_cron_shortcuts(shortcut, expected):
    assert parse_cron(shortcut).to_dict() == expected


def test_parse_cron_hourly_matches_explicit_statement():
    assert parse_cron("@hourly") == parse_cron("0 * * * *")


def test_parse_cron_five_fields():
    schedule = parse_cron("15 3 * 6 2")
    assert schedule == CronSchedule(Minute=15, Hour=3, Month=6, Weekday=2)
    assert schedule.Day == "*"


def test_parse_cron_concrete_statement_rejoins():
    statement = "30 2 1 12 5"
    assert parse_cron(statement).to_cron_string() == statement


def test_parse_cron_all_wildcards():
    schedule = parse_cron("* * * * *")
    assert schedule.calendar_interval() == {}
    assert schedule.to_cron_string() == "* * * * *"


@pytest.mark.parametrize("statement", ["", "* * * *", "0 0 * * * *", "@reboot"])
def test_parse_cron_wrong_field_count(statement):
    with pytest.raises(CronSyntaxError, match="valid cron syntax"):
        parse_cron(statement)


@pytest.mark.parametrize("statement", ["*/5 * * * *", "0 1-5 * * *", "0 0 1,15 * *", "a * * * *"])
def test_parse_cron_rejects_non_integer_fields(statement):
    with pytest.raises(CronSyntaxError, match="'\\*' or an integer"):
        parse_cron(statement)


def test_cron_syntax_error_is_a_type_error():
    with pytest.raises(ServiceTypeError):
        parse_cron("not cron")
    assert issubclass(CronSyntaxError, TypeError)


@pytest.mark.parametrize("statement", ["+5 * * * *", "5_0 * * * *", "٥ * * * *", "0 １ * * *"])
def test_parse_cron_accepts_only_ascii_integers(statement):
    with pytest.raises(CronSyntaxError):
        parse_cron(statement)


def test_parse_cron_negative_integer_is_an_integer():
    assert parse_cron("-1 * * * *").Minute == -1
