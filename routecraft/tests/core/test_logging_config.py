# ==============================================================================
# RouteCraft - Route Geometry Editing Core
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Tests for Logging Configuration Module
=======================================

Tests for the centralized logging setup.
"""

import io
import logging

import pytest

from routecraft.core.logging_config import (
    LOGGER_PREFIX,
    disable_debug,
    enable_debug,
    get_logger,
    set_log_level,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    @pytest.mark.unit
    def test_setup_returns_package_logger(self):
        logger = setup_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == LOGGER_PREFIX

    @pytest.mark.unit
    def test_setup_with_debug_level(self):
        logger = setup_logging(level=logging.DEBUG)
        assert logger.level == logging.DEBUG

    @pytest.mark.unit
    def test_repeated_setup_replaces_handler(self):
        logger = setup_logging()
        count = len(logger.handlers)
        setup_logging()
        assert len(logger.handlers) == count

    @pytest.mark.unit
    def test_output_goes_to_stream(self):
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)
        get_logger("test_output").info("Bend smoothed")

        assert "[INFO] routecraft.test_output: Bend smoothed" in stream.getvalue()

    @pytest.mark.unit
    def test_detailed_format(self):
        stream = io.StringIO()
        setup_logging(level=logging.INFO, detailed=True, stream=stream)
        get_logger("test_detailed").info("Corner rounded")

        output = stream.getvalue()
        assert "routecraft.test_detailed:" in output
        assert "Corner rounded" in output

    @pytest.mark.unit
    def test_debug_filtered_at_info_level(self):
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)
        logger = get_logger("test_filter")

        logger.debug("This should not appear")
        logger.info("This should appear")

        assert "This should not appear" not in stream.getvalue()
        assert "This should appear" in stream.getvalue()


class TestGetLogger:
    """Tests for get_logger function."""

    @pytest.mark.unit
    def test_get_logger_uses_prefix(self):
        logger = get_logger("test_module")
        assert logger.name == f"{LOGGER_PREFIX}.test_module"

    @pytest.mark.unit
    def test_package_module_names_kept(self):
        logger = get_logger("routecraft.core.proximity")
        assert logger.name == "routecraft.core.proximity"

    @pytest.mark.unit
    def test_same_name_same_logger(self):
        assert get_logger("same_name") is get_logger("same_name")


class TestLevels:
    """Tests for set_log_level, enable_debug and disable_debug."""

    @pytest.mark.unit
    def test_set_warning_level(self):
        setup_logging()
        set_log_level(logging.WARNING)

        root = logging.getLogger(LOGGER_PREFIX)
        assert root.level == logging.WARNING
        assert all(handler.level == logging.WARNING for handler in root.handlers)

    @pytest.mark.unit
    def test_enable_and_disable_debug(self):
        setup_logging()
        root = logging.getLogger(LOGGER_PREFIX)

        enable_debug()
        assert root.level == logging.DEBUG

        disable_debug()
        assert root.level == logging.INFO
