# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

import logging
import re

import pydantic
import pytest

from rargs.util.logging import ROOT_LOGGER_NAME, LoggingConfig, LoggingLevel, LoggingManager, getLogger
from rargs.util.mixins import LoggableMixin


class Thing(LoggableMixin):
    pass


class NamedThing(LoggableMixin):
    instance_name = "first"


@pytest.mark.logging
class TestGetLogger:
    def test_nests_under_package_logger(self):
        logger = getLogger("someLogger")
        assert logger.name == f"{ROOT_LOGGER_NAME}.someLogger"

    def test_module_names_are_kept(self):
        assert getLogger("rargs.parser").name == "rargs.parser"

    def test_object_names(self):
        assert getLogger(Thing()).name == f"{ROOT_LOGGER_NAME}.Thing"

    def test_propagates_to_package_logger(self, caplog):
        logger = getLogger("childLogger")
        assert logger.parent is logging.getLogger(ROOT_LOGGER_NAME)
        with caplog.at_level(logging.INFO):
            logger.info("child info")
        assert "child info" in caplog.text


@pytest.mark.logging
class TestLoggableMixin:
    def test_log_property(self):
        thing = Thing()
        assert thing.log is thing.log
        assert thing.log.name == f"{ROOT_LOGGER_NAME}.Thing"
        assert repr(thing) == "<Thing>"

    def test_instance_name(self):
        thing = NamedThing()
        assert thing.log.name == f"{ROOT_LOGGER_NAME}.NamedThing.first"

    def test_reset_log_cache(self):
        thing = NamedThing()
        first = thing.log
        thing.instance_name = "second"
        assert thing.log is first
        thing._reset_log_cache()
        assert thing.log.name == f"{ROOT_LOGGER_NAME}.NamedThing.second"


@pytest.mark.logging
class TestLoggingConfig:
    def test_defaults(self):
        config = LoggingConfig()
        assert config.level == LoggingLevel.WARNING
        assert config.default == LoggingLevel.NOTSET
        assert config.rich is False
        assert len(config.custom) == 0

    def test_custom_patterns_are_compiled(self):
        config = LoggingConfig(custom={r"^rargs\.parser": "DEBUG"})
        ((pattern, level),) = config.custom.items()
        assert isinstance(pattern, re.Pattern)
        assert pattern.match("RARGS.PARSER") is not None
        assert level == LoggingLevel.DEBUG

    def test_rejects_unknown_fields(self):
        with pytest.raises(pydantic.ValidationError):
            LoggingConfig(file="rargs.log")


@pytest.mark.logging
class TestLoggingManager:
    def test_is_singleton(self, logging_manager):
        assert LoggingManager() is logging_manager
        assert logging_manager.initialized

    def test_initialize_twice_fails(self, logging_manager):
        with pytest.raises(RuntimeError):
            logging_manager.initialize({})

    def test_handler_not_attached_in_unit_tests(self, logging_manager):
        assert logging_manager.ch is not None
        assert logging_manager.ch.level == logging.DEBUG
        assert logging_manager.ch not in logging.getLogger(ROOT_LOGGER_NAME).handlers

    def test_console_format(self, logging_manager):
        record = logging.LogRecord("rargs.parser", logging.INFO, "/src/rargs/parser.py", 42, "hello", None, None)
        record.simple = True
        assert logging_manager.ch.format(record) == "[I:rargs.parser] hello"

    def test_apply_logging_level_uses_longest_match(self, monkeypatch, logging_manager):
        config = LoggingConfig(default="INFO", custom={r"^rargs\.": "WARNING", r"^rargs\.special": "ERROR"})
        monkeypatch.setattr(logging_manager, "config", config)

        special = logging.getLogger("rargs.special_case_for_test")
        other = logging.getLogger("rargs.other_case_for_test")
        outside = logging.getLogger("outside_case_for_test")
        for logger in (special, other, outside):
            logger.setLevel(logging.NOTSET)
            logging_manager.apply_logging_level(logger)

        assert special.level == logging.ERROR
        assert other.level == logging.WARNING
        assert outside.level == logging.INFO

        explicit = logging.getLogger("rargs.explicit_case_for_test")
        explicit.setLevel(logging.CRITICAL)
        logging_manager.apply_logging_level(explicit)
        assert explicit.level == logging.CRITICAL


@pytest.mark.logging
class TestCustomRichHandler:
    def make_record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("rargs.parser", logging.INFO, "/src/rargs/parser.py", 42, "hello", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_render_message(self):
        from rargs.util.logging.rich_handler import CustomRichHandler

        handler = CustomRichHandler()
        assert handler.render_message(self.make_record(), "hello").plain == "[I:rargs.parser] hello"

    def test_render_adds_source_location(self):
        from rich.table import Table

        from rargs.util.logging.rich_handler import CustomRichHandler

        handler = CustomRichHandler()
        record = self.make_record()
        output = handler.render(record=record, message_renderable=handler.render_message(record, "hello"), traceback=None)
        assert isinstance(output, Table)
        assert len(output.columns) == 2
