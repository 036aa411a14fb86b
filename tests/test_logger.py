"""Tests for the console log formatter"""

import logging

from koj.logger import CustomFormatter


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord(
        "LookupWorker", level, __file__, 1, "Looking up %s", ("ਸਚ",), None
    )


def test_levels_are_coloured():
    formatter = CustomFormatter()

    warning = formatter.format(_record(logging.WARNING))
    error = formatter.format(_record(logging.ERROR))

    assert warning.startswith(CustomFormatter.yellow)
    assert error.startswith(CustomFormatter.red)
    assert warning.endswith(CustomFormatter.reset)
    assert "LookupWorker - WARNING - Looking up ਸਚ" in warning


def test_custom_level_is_not_coloured():
    formatter = CustomFormatter()

    message = formatter.format(_record(25))

    assert "Looking up ਸਚ" in message
    assert "\x1b[" not in message
