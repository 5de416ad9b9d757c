"""
Logging Configuration
Sets up the 'unitcircle' logger and routes Qt's own warnings into it.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QMessageLogContext, QtMsgType, qInstallMessageHandler

from unitcircle import config

QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

qt_logger = logging.getLogger("unitcircle.qt")


def qt_message_handler(mode: QtMsgType, context: QMessageLogContext, message: str) -> None:
    """Forward a Qt message (e.g. painter or platform-plugin warnings) to logging."""
    qt_logger.log(QT_LEVELS.get(mode, logging.WARNING), message)


def setup_logging(level: int = config.LOG_LEVEL, log_file: Optional[str] = config.LOG_FILE) -> logging.Logger:
    """
    Configures the logger for the 'unitcircle' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG to follow every drag update)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("unitcircle")
    logger.setLevel(level)
    logger.propagate = False

    # Called again (tests, restarts): replace our handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    qInstallMessageHandler(qt_message_handler)

    logger.info("Logging initialized (level %s).", logging.getLevelName(level))
    return logger
