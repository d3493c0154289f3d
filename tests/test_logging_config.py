import logging

import pytest

from geokernel import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("geokernel")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestSetupLogging:
    def test_console_handler(self, package_logger):
        setup_logging(logging.DEBUG)
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0], logging.StreamHandler)

    def test_repeated_setup_does_not_stack_handlers(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_file_handler(self, package_logger, tmp_path):
        log_file = tmp_path / "geokernel.log"
        setup_logging(logging.INFO, str(log_file))
        assert len(package_logger.handlers) == 2
        logging.getLogger("geokernel.triangulation").info("triangulated")
        for handler in package_logger.handlers:
            handler.flush()
        assert "triangulated" in log_file.read_text(encoding="utf-8")

    def test_returns_package_logger(self, package_logger):
        logger = setup_logging(propagate=False)
        assert logger is package_logger
        assert logger.propagate is False
