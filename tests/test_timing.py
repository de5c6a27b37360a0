"""Tests for the measure() timing helper."""

import logging
import time

import pytest

from pagewait.timing import measure


class TestMeasure:
    def test_records_elapsed_and_logs(self, caplog):
        with caplog.at_level(logging.INFO):
            with measure("has_content?") as timer:
                time.sleep(0.05)
        assert timer.elapsed >= 0.05
        assert timer.label == "has_content?"
        assert any(
            r.getMessage().startswith("has_content? in ") for r in caplog.records
        )

    def test_records_elapsed_when_block_raises(self):
        with pytest.raises(AssertionError):
            with measure("failing block") as timer:
                time.sleep(0.01)
                raise AssertionError("nope")
        assert timer.elapsed >= 0.01
