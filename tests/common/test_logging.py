import logging

from tagapi.common.logging import get_logger


def test_get_logger_accepts_level_names():
    log = get_logger("tagapi.test.names", "warning")
    assert log.level == logging.WARNING


def test_get_logger_unknown_level_falls_back_to_info():
    log = get_logger("tagapi.test.unknown", "chatty")
    assert log.level == logging.INFO
