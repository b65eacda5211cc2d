"""Tests for the structured logger."""

import logging

import pytest

from zurichat.utils.logger import Logger, _resolve_level, logger


class TestLogger:
    @pytest.mark.parametrize(
        "level_name,expected",
        [
            ("debug", logging.DEBUG),
            ("WARNING", logging.WARNING),
            ("bogus", logging.INFO),
            (None, logging.INFO),
        ],
    )
    def test_resolve_level(self, level_name, expected):
        assert _resolve_level(level_name) == expected

    def test_singleton(self):
        assert Logger() is logger

    def test_keyword_arguments_become_record_fields(self, caplog):
        with caplog.at_level(logging.INFO, logger="zurichat"):
            logger.info("Fetched organization", org_id="org-1")

        [record] = caplog.records
        assert record.org_id == "org-1"
        assert not hasattr(record, "file")

    def test_error_records_caller_location(self, caplog):
        with caplog.at_level(logging.INFO, logger="zurichat"):
            logger.error("Upload failed")

        [record] = caplog.records
        assert record.file.rsplit(":", 1)[0].endswith("test_logger.py")
