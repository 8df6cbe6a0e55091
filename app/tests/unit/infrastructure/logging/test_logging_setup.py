"""Unit tests for infrastructure.logging.setup module."""

import logging

import pytest

from infrastructure.logging import setup


@pytest.mark.unit
class TestConfigureLogging:
    def test_detects_test_environment(self):
        assert setup._is_test_environment() is True

    def test_logging_silenced_under_tests(self):
        setup.configure_logging()
        assert logging.root.level > logging.CRITICAL

    def test_module_logger_binds_component(self):
        logger = setup.get_module_logger()
        context = logger._context
        assert context["component"] == "test_logging_setup"
        assert context["module_path"].endswith("test_logging_setup")
