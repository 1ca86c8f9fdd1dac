"""
Tests for logging setup
"""

import io
import logging

from drama_detection import utils


def test_setup_logger_console_only():
    logger = utils.setup_logger('drama_detection.test_console')

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_setup_logger_writes_file(tmp_path, monkeypatch):
    monkeypatch.setattr(utils, 'LOGS_DIR', tmp_path / 'logs')

    logger = utils.setup_logger('drama_detection.test_file', 'drama.log', level=logging.DEBUG)
    logger.debug("classifier ready")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / 'logs' / 'drama.log'
    assert log_file.exists()
    assert "classifier ready" in log_file.read_text()

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_setup_logger_replaces_handlers():
    utils.setup_logger('drama_detection.test_repeat')
    logger = utils.setup_logger('drama_detection.test_repeat')

    assert len(logger.handlers) == 1


def test_package_logger_is_quiet_by_default():
    from drama_detection import DramaClassifier

    assert utils.logger.level == logging.WARNING
    assert not utils.logger.isEnabledFor(logging.INFO)

    stream = io.StringIO()
    handler = utils.logger.handlers[0]
    original = handler.setStream(stream)
    try:
        DramaClassifier().update_thresholds(score_threshold=2.0)
    finally:
        handler.setStream(original)

    assert stream.getvalue() == "", "Threshold updates should not print by default"
