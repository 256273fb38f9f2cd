# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

# This file defines pytest fixtures for the test suite, and collects docstring examples as doctests.
from doctest import ELLIPSIS, IGNORE_EXCEPTION_DETAIL

import pytest

from sybil import Sybil
from sybil.parsers.rest import DocTestParser, PythonCodeBlockParser

from rargs.util.logging import LoggingManager


# Automatically provide a logging manager for all tests
@pytest.fixture(autouse=True, scope="session")
def logging_manager() -> LoggingManager:
    manager = LoggingManager()
    manager.initialize(
        {
            "level": "DEBUG",
            "rich": False,
        }
    )
    return manager


pytest_collect_file = Sybil(
    parsers=[
        DocTestParser(optionflags=ELLIPSIS | IGNORE_EXCEPTION_DETAIL),
        PythonCodeBlockParser(),
    ],
    patterns=["*.py"],
    excludes=["conftest.py", "test_*.py"],
).pytest()
