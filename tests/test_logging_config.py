import logging

from numberline.logging_config import setup_logging


def test_setup_is_idempotent(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = logging.getLogger("numberline")
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")
