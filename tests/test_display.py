import logging
from unittest.mock import MagicMock, patch
import pytest

from finch_vm_cli.display import Display
from finch_vm_cli.schemas import VMStatus


@pytest.fixture
def restore_root_logger():
    """Keeps the root logger configuration intact across Display instantiation."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestDisplayInitialization:
    """Tests for Display logging setup."""

    def test_verbose_property(self, restore_root_logger):
        assert Display(verbose=True).verbose is True
        assert Display().verbose is False

    def test_debug_level_when_verbose(self, restore_root_logger):
        """Verbose mode configures the root logger for DEBUG."""
        Display(verbose=True)
        assert restore_root_logger.level == logging.DEBUG

    def test_info_level_by_default(self, restore_root_logger):
        """Default mode configures the root logger for INFO."""
        Display(verbose=False)
        assert restore_root_logger.level == logging.INFO

    def test_uses_single_rich_handler(self, restore_root_logger):
        """Existing handlers are replaced by a single RichHandler."""
        from rich.logging import RichHandler

        restore_root_logger.addHandler(logging.NullHandler())
        Display()

        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0], RichHandler)


class TestDisplayOutput:
    """Tests for Display output methods."""

    @patch('finch_vm_cli.display.Console')
    def test_error_without_suggestion(self, MockConsole, restore_root_logger):
        display = Display()
        display.error('the instance "finch" is already stopped')

        panel = MockConsole.return_value.print.call_args[0][0]
        assert 'the instance "finch" is already stopped' in panel.renderable
        assert "Suggestion" not in panel.renderable
        assert panel.border_style == "red"

    @patch('finch_vm_cli.display.Console')
    def test_error_with_suggestion(self, MockConsole, restore_root_logger):
        display = Display()
        display.error("limactl not found", "Install Finch first.")

        panel = MockConsole.return_value.print.call_args[0][0]
        assert "limactl not found" in panel.renderable
        assert "[bold]Suggestion:[/] Install Finch first." in panel.renderable

    @pytest.mark.parametrize("status, expected", [
        (VMStatus.RUNNING, "finch: [bold green]Running[/]"),
        (VMStatus.STOPPED, "finch: [yellow]Stopped[/]"),
        (VMStatus.NONEXISTENT, "finch: [dim]Nonexistent[/]"),
        (VMStatus.UNRECOGNIZED, "finch: [bold red]Unrecognized[/]"),
    ])
    @patch('finch_vm_cli.display.Console')
    def test_vm_status(self, MockConsole, status, expected, restore_root_logger):
        display = Display()
        display.vm_status("finch", status)

        MockConsole.return_value.print.assert_called_once_with(expected)
