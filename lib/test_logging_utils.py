"""
Tests for logging utilities.
"""

import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from lib.logging_utils import configureLogger, getLogLevelByStr, initLogging


@pytest.fixture
def cleanLogger():
    """Provide a logger without handlers, restored after test"""
    localLogger = logging.getLogger("test.geocode.logging")
    yield localLogger
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)
        handler.close()
    localLogger.setLevel(logging.NOTSET)


@pytest.fixture
def restoreRootLogger():
    rootLogger = logging.getLogger()
    savedLevel = rootLogger.level
    savedHandlers = rootLogger.handlers[:]
    yield rootLogger
    for handler in rootLogger.handlers[:]:
        rootLogger.removeHandler(handler)
    for handler in savedHandlers:
        rootLogger.addHandler(handler)
    rootLogger.setLevel(savedLevel)


def testGetLogLevelByStr():
    assert getLogLevelByStr("debug") == logging.DEBUG
    assert getLogLevelByStr("WARNING") == logging.WARNING
    assert getLogLevelByStr("nonsense") is None
    assert getLogLevelByStr("nonsense", logging.INFO) == logging.INFO
    # Attribute exists but isn't a level
    assert getLogLevelByStr("basicConfig") is None


def testConfigureConsoleLogger(cleanLogger):
    configureLogger(cleanLogger, {"level": "DEBUG", "console": True, "console-level": "ERROR"})

    assert cleanLogger.level == logging.DEBUG
    assert len(cleanLogger.handlers) == 1
    assert isinstance(cleanLogger.handlers[0], logging.StreamHandler)
    assert cleanLogger.handlers[0].level == logging.ERROR


def testConfigureFileLogger(cleanLogger, tmp_path):
    """Test file handler is created together with missing directories"""
    logFile = tmp_path / "logs" / "geocode.log"

    configureLogger(cleanLogger, {"level": "INFO", "file": str(logFile), "rotate": True})
    cleanLogger.info("hello")

    assert len(cleanLogger.handlers) == 1
    assert isinstance(cleanLogger.handlers[0], TimedRotatingFileHandler)
    cleanLogger.handlers[0].flush()
    assert "hello" in logFile.read_text(encoding="utf-8")


def testReconfigureDropsOldHandlers(cleanLogger):
    configureLogger(cleanLogger, {"console": True})
    configureLogger(cleanLogger, {"console": True})

    assert len(cleanLogger.handlers) == 1


def testInitLogging(restoreRootLogger):
    """Test root level, quiet http loggers and per-logger settings"""
    initLogging(
        {
            "level": "DEBUG",
            "logger": {"lib.google_geocode": {"level": "ERROR"}},
        }
    )

    assert restoreRootLogger.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
    assert logging.getLogger("lib.google_geocode").level == logging.ERROR
    logging.getLogger("lib.google_geocode").setLevel(logging.NOTSET)
