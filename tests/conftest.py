import io
import os

# The module-level consoles read FORCE_COLOR when they are created.
os.environ.pop("FORCE_COLOR", None)

import pytest  # noqa: E402
import rich.console  # noqa: E402

from samtid.core.common_types import CommandStatus  # noqa: E402
from samtid.core.status_table import StatusTable  # noqa: E402


def make_console(width: int = 80) -> rich.console.Console:
    """A console that writes plain text to a buffer, like when piped to a file."""
    return rich.console.Console(
        file=io.StringIO(),
        width=width,
        color_system=None,
        force_terminal=False,
        force_jupyter=False,
    )


def console_output(console: rich.console.Console) -> str:
    assert isinstance(console.file, io.StringIO)
    return console.file.getvalue()


@pytest.fixture
def plain_console():
    return make_console()


@pytest.fixture
def error_console():
    return make_console(width=120)


@pytest.fixture
def mixed_table():
    """Table with one succeeded, one failed and one pending command."""
    table = StatusTable(["true", "false", "sleep 10"])
    table.set(0, CommandStatus(0))
    table.set(1, CommandStatus(2, None, "something went wrong"))
    return table


@pytest.fixture(autouse=True)
def no_forced_colors(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("DEBUG_SAMTID", raising=False)
