"""Unit tests for utility functions (stubsmith.utils).

Tests cover:
- get_logger naming under the stubsmith hierarchy
- configure_logging levels and handler reset
- Rich output helpers (print_summary_table, print_next_steps, etc.)
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from rich.logging import RichHandler

from stubsmith.utils import (
    configure_logging,
    get_logger,
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)


class TestGetLogger:
    @pytest.mark.unit
    def test_root(self):
        assert get_logger().name == "stubsmith"

    @pytest.mark.unit
    def test_child(self):
        assert get_logger("cli").name == "stubsmith.cli"

    @pytest.mark.unit
    def test_module_name_kept(self):
        assert get_logger("stubsmith.scaffolder.generator").name == "stubsmith.scaffolder.generator"


class TestConfigureLogging:
    @pytest.mark.unit
    def test_default_level_is_warning(self):
        logger = configure_logging()
        assert logger.level == logging.WARNING

    @pytest.mark.unit
    def test_verbose(self):
        logger = configure_logging(verbose=True)
        assert logger.level == logging.DEBUG

    @pytest.mark.unit
    def test_single_rich_handler(self):
        configure_logging()
        logger = configure_logging()
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_success(self):
        with patch("stubsmith.utils.console") as mock_console:
            print_success("done")
        mock_console.print.assert_called_once_with("[bold green]done[/bold green]")

    @pytest.mark.unit
    def test_print_error(self):
        with patch("stubsmith.utils.console") as mock_console:
            print_error("boom")
        mock_console.print.assert_called_once_with("[bold red]boom[/bold red]")

    @pytest.mark.unit
    def test_print_warning(self):
        with patch("stubsmith.utils.console") as mock_console:
            print_warning("careful")
        mock_console.print.assert_called_once_with("[bold yellow]careful[/bold yellow]")

    @pytest.mark.unit
    def test_print_summary_table(self):
        with patch("stubsmith.utils.console") as mock_console:
            print_summary_table({"model": "models/Song.py"}, title="Resource Song")
        table = mock_console.print.call_args_list[0].args[0]
        assert table.title == "Resource Song"
        assert table.row_count == 1

    @pytest.mark.unit
    def test_print_next_steps(self):
        with patch("stubsmith.utils.console") as mock_console:
            print_next_steps(["one", "two"])
        panel = mock_console.print.call_args.args[0]
        assert panel.renderable == "1. one\n2. two"

    @pytest.mark.unit
    def test_print_next_steps_empty(self):
        with patch("stubsmith.utils.console") as mock_console:
            print_next_steps([])
        mock_console.print.assert_not_called()
