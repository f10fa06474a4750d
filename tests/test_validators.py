# tests/test_validators.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from taskboard.features.tasks.validators import (
    MSG_INVALID_DATE,
    MSG_PAST_DATE,
    TaskValidationError,
    effective_due_string,
    validate_due_datetime,
    validate_priority,
    validate_status_update,
)

NOW = datetime(2026, 3, 10, 12, 0, 0)


def test_effective_due_string_defaults_to_end_of_day() -> None:
    assert effective_due_string("2026-03-10", None) == "2026-03-10 23:59:59"
    assert effective_due_string("2026-03-10", "") == "2026-03-10 23:59:59"
    assert effective_due_string("2026-03-10", "08:00") == "2026-03-10 08:00"


def test_due_exactly_now_is_accepted() -> None:
    assert validate_due_datetime("2026-03-10", "12:00:00", now=NOW) == NOW


def test_due_one_second_ago_is_rejected() -> None:
    with pytest.raises(TaskValidationError) as exc:
        validate_due_datetime("2026-03-10", "11:59:59", now=NOW)
    assert str(exc.value) == MSG_PAST_DATE


def test_due_yesterday_end_of_day_is_rejected() -> None:
    with pytest.raises(TaskValidationError, match="passé"):
        validate_due_datetime("2026-03-09", None, now=NOW)


def test_due_with_timezone_is_converted_to_local_naive() -> None:
    due = validate_due_datetime("2030-01-01", "10:00:00+00:00", now=NOW)
    assert due.tzinfo is None
    assert due == datetime(2030, 1, 1, 10, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)


@pytest.mark.parametrize("due_date", ["2026-02-30", "10/03/2026", "   ", "2026-03-10T08:00"])
def test_unparseable_dates(due_date: str) -> None:
    with pytest.raises(TaskValidationError) as exc:
        validate_due_datetime(due_date, None, now=NOW)
    assert str(exc.value) == MSG_INVALID_DATE


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_priority("n'importe quoi")


def test_priority_and_status_allow_lists_are_distinct() -> None:
    assert validate_priority("moins important") == "moins important"
    assert validate_status_update("annule") == "annule"
    with pytest.raises(TaskValidationError):
        validate_status_update("annulé")
    with pytest.raises(TaskValidationError):
        validate_priority("en cours")
