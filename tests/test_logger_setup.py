import logging
import pytest

import logger_setup


@pytest.fixture
def restore_logging():
    """setup_logging rewires the root logger; put it back after each test."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    urllib3_level = logging.getLogger("urllib3").level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    logging.getLogger("urllib3").setLevel(urllib3_level)


def test_setup_logging_writes_file_at_level(restore_logging, tmp_path):
    log_file = tmp_path / "logs" / "mirror.log"

    logger_setup.setup_logging(str(log_file), "WARNING")
    logging.info("not written")
    logging.warning("Mirror run aborted: boom")
    for handler in restore_logging.handlers:
        handler.flush()

    assert restore_logging.level == logging.WARNING
    assert len(restore_logging.handlers) == 2
    text = log_file.read_text(encoding='utf-8')
    assert " - WARNING - Mirror run aborted: boom" in text
    assert "not written" not in text


def test_setup_logging_quiets_http_stack(restore_logging, tmp_path):
    logger_setup.setup_logging(str(tmp_path / "mirror.log"), "info")
    assert logging.getLogger("urllib3").level == logging.WARNING

    logger_setup.setup_logging(str(tmp_path / "mirror.log"), "DEBUG")
    assert logging.getLogger("urllib3").level == logging.DEBUG
    assert len(restore_logging.handlers) == 2 # Earlier handlers replaced


def test_setup_logging_unknown_level(restore_logging, tmp_path):
    with pytest.raises(ValueError):
        logger_setup.setup_logging(str(tmp_path / "mirror.log"), "LOUD")


def test_setup_logging_unwritable_log_exits(restore_logging, tmp_path, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    with pytest.raises(SystemExit) as e:
        logger_setup.setup_logging(str(blocker / "mirror.log"))

    assert e.value.code == 1
    assert "Could not set up file logging" in capsys.readouterr().err
