# tests/test_out_of_range.py

import logging
from datetime import date

import pytest

import datetrans
from datetrans import transitions as tr
from datetrans.core.errors import DateTransError, OutOfRangeError


@pytest.mark.parametrize(
    "fn",
    [
        tr.start_of_succ_year,
        tr.end_of_succ_year,
        tr.start_of_succ_month,
        tr.end_of_succ_month,
        tr.end_of_current_iso_week,
        tr.start_of_succ_iso_week,
        tr.end_of_succ_iso_week,
    ],
)
def test_forward_past_date_max(fn):
    # 9999-12-31 is a Friday
    with pytest.raises(OutOfRangeError):
        fn(date.max)


@pytest.mark.parametrize(
    "fn",
    [
        tr.start_of_pred_year,
        tr.end_of_pred_year,
        tr.start_of_pred_month,
        tr.end_of_pred_month,
        tr.start_of_pred_iso_week,
        tr.end_of_pred_iso_week,
    ],
)
def test_backward_before_date_min(fn):
    # 0001-01-01 is a Monday
    with pytest.raises(OutOfRangeError):
        fn(date(1, 1, 3))


def test_current_period_at_the_limits_is_fine():
    assert tr.start_of_current_iso_week(date.min) == date.min
    assert tr.start_of_current_year(date.max) == date(9999, 1, 1)
    assert tr.end_of_current_year(date.max) == date.max
    assert tr.end_of_current_month(date.max) == date.max
    assert tr.start_of_current_month(date.min) == date.min
    assert tr.start_of_current_iso_week(date.max) == date(9999, 12, 27)


def test_error_hierarchy():
    with pytest.raises(DateTransError):
        tr.start_of_succ_year(date.max)
    # callers already catching the host's overflow keep working
    with pytest.raises(OverflowError):
        tr.end_of_current_iso_week(date.max)


def test_error_chains_host_exception():
    with pytest.raises(OutOfRangeError) as ei:
        tr.start_of_pred_year(date(1, 6, 1))
    assert isinstance(ei.value.__cause__, ValueError)
    assert "0-01-01" in str(ei.value)

    with pytest.raises(OutOfRangeError) as ei:
        tr.start_of_pred_iso_week(date.min)
    assert isinstance(ei.value.__cause__, OverflowError)


def test_non_strict_transition_returns_none():
    assert datetrans.transition(date.max, "year", "succ", "start", strict=False) is None
    assert datetrans.transition(date.min, "week", "pred", "end", strict=False) is None
    assert datetrans.transition(date.max, "year", "current", "end", strict=False) == date.max


def test_strict_transition_raises():
    with pytest.raises(OutOfRangeError):
        datetrans.transition(date.max, "month", "succ", "start")


def test_out_of_range_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="datetrans"):
        datetrans.transition(date.max, "year", "succ", "end", strict=False)
    records = [r for r in caplog.records if r.name == "datetrans.core.gregorian"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert "10000-12-31" in records[0].getMessage()


@pytest.fixture
def package_logger():
    logger = logging.getLogger("datetrans")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_configure_logging_only_touches_package_logger(package_logger):
    root_handlers = list(logging.getLogger().handlers)

    logger = datetrans.configure_logging(level=logging.INFO)

    assert logger is package_logger
    assert logger.level == logging.INFO
    assert logging.getLogger().handlers == root_handlers
    streams = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(streams) == 1
    assert "%(name)s" in streams[0].formatter._fmt


def test_configure_logging_is_idempotent(package_logger):
    datetrans.configure_logging()
    datetrans.configure_logging(level=logging.WARNING)
    streams = [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(streams) == 1
    assert package_logger.level == logging.WARNING


def test_configure_logging_force_replaces_handler(package_logger):
    datetrans.configure_logging()
    first = [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]

    datetrans.configure_logging(force=True)
    second = [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]

    assert len(second) == 1
    assert second[0] is not first[0]


def test_configure_logging_emits_range_failures(package_logger, capsys):
    datetrans.configure_logging(level=logging.DEBUG)
    datetrans.transition(date.max, "year", "succ", "start", strict=False)
    err = capsys.readouterr().err
    assert "DEBUG [datetrans.core.gregorian]" in err
    assert "10000-01-01" in err
