import io
import re
import time

from conftest import console_output, make_console
import rich.console

from samtid.core.common_types import CommandStatus
from samtid.core.status_table import StatusTable
from samtid.output.status_display import Renderer


def rendered_lines(renderer: Renderer) -> list[str]:
    console = make_console()
    console.print(renderer.render())
    return [line.rstrip() for line in console_output(console).splitlines()]


def test_one_line_per_command(mixed_table, plain_console):
    renderer = Renderer(mixed_table, plain_console)
    lines = rendered_lines(renderer)
    assert len(lines) == 3
    assert lines[0] == "✓ true"
    assert lines[1] == "✗ false"
    assert lines[2].endswith(" sleep 10")
    assert not lines[2].startswith(("✓", "✗"))


def test_lines_follow_submission_order(plain_console):
    table = StatusTable(["c", "b", "a", "b"])
    table.set(3, CommandStatus(0))
    table.set(0, CommandStatus(1))
    lines = rendered_lines(Renderer(table, plain_console))
    assert [line[2:] for line in lines] == ["c", "b", "a", "b"]
    assert lines[0].startswith("✗")
    assert lines[3].startswith("✓")


def test_long_commands_do_not_wrap(plain_console):
    table = StatusTable(["echo " + "x" * 200, "true"])
    table.set(0, CommandStatus(0))
    lines = rendered_lines(Renderer(table, plain_console))
    assert len(lines) == 2
    assert lines[0].startswith("✓ echo xxx")
    assert lines[0].endswith("…")


def test_markup_in_commands_is_not_interpreted(plain_console):
    table = StatusTable(["echo [bold]hi[/bold]"])
    table.set(0, CommandStatus(0))
    assert rendered_lines(Renderer(table, plain_console)) == ["✓ echo [bold]hi[/bold]"]


def test_no_periodic_redraws_without_terminal(mixed_table, plain_console):
    renderer = Renderer(mixed_table, plain_console)
    renderer.start()
    assert console_output(plain_console) == ""
    renderer.finish()

    lines = console_output(plain_console).splitlines()
    assert len(lines) == 3
    assert lines[0].rstrip() == "✓ true"


def test_final_redraw_shows_latest_state(plain_console):
    table = StatusTable(["true", "false"])
    renderer = Renderer(table, plain_console)
    renderer.start()
    table.set(0, CommandStatus(0))
    table.set(1, CommandStatus(1))
    renderer.finish()

    lines = [line.rstrip() for line in console_output(plain_console).splitlines()]
    assert lines == ["✓ true", "✗ false"]


def test_finish_twice_prints_once(mixed_table, plain_console):
    renderer = Renderer(mixed_table, plain_console)
    renderer.start()
    renderer.finish()
    renderer.finish()
    assert len(console_output(plain_console).splitlines()) == 3


def test_empty_table_renders_nothing(plain_console):
    renderer = Renderer(StatusTable([]), plain_console)
    renderer.start()
    renderer.finish()
    assert console_output(plain_console).strip() == ""


ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")
# Carriage return, then erase line and move up for every line of a two-line block
REDRAW_TWO_LINES = "\r\x1b[2K\x1b[1A\x1b[2K"


def test_terminal_redraws_in_place(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    console = rich.console.Console(
        file=io.StringIO(),
        width=40,
        force_terminal=True,
        color_system=None,
        force_jupyter=False,
    )
    table = StatusTable(["a", "b"])
    renderer = Renderer(table, console, interval=0.01)
    renderer.start()
    time.sleep(0.2)
    table.set(0, CommandStatus(0))
    time.sleep(0.1)
    table.set(1, CommandStatus(1))
    renderer.finish()

    output = console_output(console)
    assert REDRAW_TWO_LINES in output
    frames = [ANSI_ESCAPE.sub("", frame) for frame in output.split(REDRAW_TWO_LINES)]
    # Periodic redraws happened, not just the final one
    assert len(frames) > 3
    for frame in frames:
        assert len(frame.strip("\n").split("\n")) == 2
    assert [line.rstrip() for line in frames[-1].strip("\n").split("\n")] == [
        "✓ a",
        "✗ b",
    ]
