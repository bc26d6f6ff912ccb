"""Tests for logging setup."""

import gzip
import sys

import pytest
from loguru import logger

from settings import logging as log_settings


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(log_settings, "LOG_DIR", tmp_path)
    yield tmp_path
    logger.remove()
    logger.add(sys.stderr)


def read_log(log_dir, run_name):
    # The sink compresses its file when removed
    [path] = log_dir.glob(f"{run_name}_*.log*")
    if path.suffix == ".gz":
        with gzip.open(path, "rt") as f:
            return f.read()
    return path.read_text()


class TestFileSink:
    def test_named_after_run(self, log_dir):
        log_settings.setup_logging(to_file=True, run_name="klimek")
        with logger.contextualize(detector="klimek"):
            logger.debug("alpha computed")
        logger.remove()

        text = read_log(log_dir, "klimek")
        assert "| klimek |" in text
        assert "alpha computed" in text

    def test_no_file_by_default(self, log_dir):
        log_settings.setup_logging()
        logger.info("console only")
        assert list(log_dir.iterdir()) == []

    def test_detector_defaults_outside_run(self, log_dir):
        log_settings.setup_logging(to_file=True, run_name="pvt")
        logger.warning("no detector bound")
        logger.remove()

        assert "| - |" in read_log(log_dir, "pvt")
