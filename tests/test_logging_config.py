import logging

from authforms.core import configure_logging, parse_log_level


def test_parse_log_level_names_and_fallback() -> None:
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level(" WARNING ") == logging.WARNING
    assert parse_log_level(None) == logging.INFO
    assert parse_log_level("loud", default=logging.ERROR) == logging.ERROR


def test_configure_logging_quiets_urllib3_unless_debugging() -> None:
    configure_logging(logging.INFO)
    assert logging.getLogger("urllib3").level == logging.WARNING

    configure_logging(logging.DEBUG)
    assert logging.getLogger("urllib3").level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
