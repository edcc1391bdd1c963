import logging

from offline_summarizer.log import setup_logger


def test_setup_logger_is_idempotent():
    logger = setup_logger("offline_summarizer.test_log", level=logging.DEBUG)
    setup_logger("offline_summarizer.test_log", level=logging.DEBUG)
    handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG


def test_package_logger_has_null_handler():
    import offline_summarizer  # noqa: F401

    logger = logging.getLogger("offline_summarizer")
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
