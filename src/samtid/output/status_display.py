import rich.console
import rich.live
import rich.spinner
import rich.table
import rich.text

from samtid.core.common_types import Entry
from samtid.core.status_table import StatusTable
from samtid.logutils import logger
from samtid.output.output import console as default_console

SUCCESS_GLYPH = rich.text.Text("✓", style="green")
FAILURE_GLYPH = rich.text.Text("✗", style="red")

DEFAULT_INTERVAL = 0.05


class Renderer:
    """
    Live status block with one line per command, redrawn in place.

    The block is rebuilt from a fresh snapshot of the table on every refresh, so a
    missed refresh only delays what is shown. Periodic refreshing only happens when
    the console is a terminal; otherwise the block is printed once, by finish().
    """

    table: StatusTable
    console: rich.console.Console
    interval: float

    def __init__(
        self,
        table: StatusTable,
        console: rich.console.Console | None = None,
        interval: float = DEFAULT_INTERVAL,
        spinner_name: str = "dots",
    ):
        self.table = table
        self.console = console if console is not None else default_console
        self.interval = interval
        # One spinner per entry; a spinner's frame is derived from when it was
        # first rendered.
        self._spinners = [
            rich.spinner.Spinner(spinner_name, style="blue") for _ in range(len(table))
        ]
        self._live = rich.live.Live(
            console=self.console,
            auto_refresh=self.console.is_terminal,
            refresh_per_second=1 / interval,
            get_renderable=self.render,
        )

    def format_line(
        self, entry: Entry
    ) -> tuple[rich.console.RenderableType, rich.text.Text]:
        match entry.state:
            case "succeeded":
                glyph: rich.console.RenderableType = SUCCESS_GLYPH
            case "failed":
                glyph = FAILURE_GLYPH
            case "pending":
                glyph = self._spinners[entry.index]
            case _:
                raise ValueError(f"Unhandled command state {entry.state}")
        return glyph, rich.text.Text(entry.command, no_wrap=True, overflow="ellipsis")

    def render(self) -> rich.table.Table:
        grid = rich.table.Table.grid(padding=(0, 1))
        grid.add_column(no_wrap=True)
        grid.add_column()
        for entry in self.table.snapshot():
            grid.add_row(*self.format_line(entry))
        return grid

    def start(self):
        if len(self.table) == 0:
            logger.debug("No commands, not starting status display")
            return
        logger.debug("Starting status display (terminal: %s)", self.console.is_terminal)
        self._live.start()

    def finish(self):
        """Draw the final state of the table and stop the live display."""
        if not self._live.is_started:
            return
        self._live.refresh()
        self._live.stop()
