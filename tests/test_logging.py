import logging

import pytest

from lagrangelib.interpolation import (
    InsufficientPointsError,
    LagrangeInterpolator,
    OutOfRangeError,
    lagrange_interpolate,
)


def _messages(caplog):
    return [r.getMessage() for r in caplog.records]


def test_interpolation_logs_size_and_query(caplog, sine_table):
    caplog.set_level(logging.DEBUG, logger="lagrangelib")
    lagrange_interpolate(sine_table, 51.0)
    assert "Lagrange interpolation on 4 points at x=51.0" in _messages(caplog)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)


def test_out_of_range_logged_before_raise(caplog, sine_table):
    caplog.set_level(logging.DEBUG, logger="lagrangelib")
    with pytest.raises(OutOfRangeError):
        lagrange_interpolate(sine_table, 100.0)
    assert "Rejecting x=100.0 outside (0.0, 90.0)" in _messages(caplog)


def test_small_table_logged_before_raise(caplog):
    caplog.set_level(logging.DEBUG, logger="lagrangelib")
    with pytest.raises(InsufficientPointsError):
        lagrange_interpolate([(1.0, 1.0)], 1.0)
    assert "Rejecting table of 1 points" in _messages(caplog)


def test_construction_logged(caplog, sine_table):
    caplog.set_level(logging.DEBUG, logger="lagrangelib")
    xs, ys = zip(*sine_table)
    LagrangeInterpolator(xs, ys)
    assert "LagrangeInterpolator built on 4 points over (0.0, 90.0)" in _messages(caplog)


def test_normal_use_is_quiet_above_debug(caplog, sine_table):
    caplog.set_level(logging.INFO, logger="lagrangelib")
    xs, ys = zip(*sine_table)
    LagrangeInterpolator(xs, ys).interpolate_many([15.0, 45.0, 75.0])
    lagrange_interpolate(sine_table, 51.0)
    assert caplog.records == []
