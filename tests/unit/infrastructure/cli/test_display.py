import pytest
from unittest.mock import MagicMock
from datetime import datetime

from rich.panel import Panel
from rich.table import Table

from tokensale.domain.models.application import Application, PublicApplication
from tokensale.infrastructure.cli.display import ConsoleDisplay, _format_value


@pytest.fixture
def mock_console():
    """Fixture to create a mock rich Console object."""
    return MagicMock()


@pytest.fixture
def console_display(mock_console: MagicMock):
    """Fixture to create a ConsoleDisplay instance with a mocked console."""
    display = ConsoleDisplay()
    display.console = mock_console # Inject the mock
    return display


def test_display_error(console_display: ConsoleDisplay, mock_console: MagicMock):
    """Test that display_error prints a single panel."""
    console_display.display_error("Something went wrong")
    mock_console.print.assert_called_once()
    args, _ = mock_console.print.call_args
    assert isinstance(args[0], Panel)


def test_display_application(console_display: ConsoleDisplay, mock_console: MagicMock):
    """Test that an application is rendered as one row per present field."""
    application = PublicApplication(private_id="p", public_id="q", email="foo@bar.baz")

    console_display.display_application(application, title="Yours")

    panel = mock_console.print.call_args.args[0]
    assert isinstance(panel, Panel)
    assert isinstance(panel.renderable, Table)
    assert panel.renderable.row_count == 3


def test_display_applications(console_display: ConsoleDisplay, mock_console: MagicMock):
    """Test that the admin listing prints a table with one row per application."""
    console_display.display_applications([Application(public_id="a"), Application(public_id="b")])

    table = mock_console.print.call_args_list[0].args[0]
    assert isinstance(table, Table)
    assert table.row_count == 2


def test_display_applications_empty(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_applications([])
    mock_console.print.assert_called_once()


def test_format_value():
    assert _format_value(datetime(2018, 3, 1, 12, 30)) == "2018-03-01 12:30:00"
    assert _format_value(("a", "b")) == "a, b"
    assert _format_value("Ada") == "Ada"
