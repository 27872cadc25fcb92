import logging
import os
from unittest import mock

from datadog_monitors.logger import setup_logging


def test_setup_logging_reads_level_and_quiets_urllib3():
    root = logging.getLogger()
    previous = root.level
    try:
        with mock.patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            setup_logging()
        assert root.level == logging.DEBUG
        assert logging.getLogger("urllib3").level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_setup_logging_unknown_level_defaults_to_info():
    root = logging.getLogger()
    previous = root.level
    try:
        with mock.patch.dict(os.environ, {"LOG_LEVEL": "chatty"}):
            setup_logging()
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


def test_setup_logging_explicit_level_overrides_env():
    root = logging.getLogger()
    previous = root.level
    try:
        with mock.patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            setup_logging("warning")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
