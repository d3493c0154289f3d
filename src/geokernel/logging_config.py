"""
Logging Configuration
=====================
geokernel never configures logging on import. Modules log through
``logging.getLogger(__name__)`` under the ``geokernel`` namespace, which
carries only a NullHandler until a host application calls
:func:`setup_logging`.

What gets logged:
    * WARNING - missing pairs found by the intersection registry audit.
    * DEBUG   - registry summary, unregistered pair lookups, unrefined closest-point
      samples and triangulation counts.
"""
import logging
import sys
from typing import List, Optional

PACKAGE_LOGGER = "geokernel"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _build_handlers(level: int, log_file: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None, propagate: bool = True) -> logging.Logger:
    """
    Attaches console (and optionally file) output to the 'geokernel' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        propagate: Whether records also reach the host's root handlers.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = propagate

    # Calling setup twice replaces the previous handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(level, log_file):
        logger.addHandler(handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}")
    return logger
