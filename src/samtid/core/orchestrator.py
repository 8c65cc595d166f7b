from collections.abc import Sequence
from typing import Mapping

import rich.console

from samtid.core.common_types import RunState
from samtid.core.status_table import StatusTable
from samtid.core.supervisor import Supervisor
from samtid.logutils import logger
from samtid.output.error_report import report_errors
from samtid.output.status_display import DEFAULT_INTERVAL, Renderer


class Orchestrator:
    """
    Runs the commands with a live status display and reports the failures.

        starting -> running -> draining -> done

    run() returns the exit code: 0 if every command succeeded, otherwise 1.
    """

    state: RunState
    table: StatusTable
    supervisor: Supervisor
    renderer: Renderer
    error_console: rich.console.Console | None

    def __init__(
        self,
        commands: Sequence[str],
        env: Mapping[str, str] | None = None,
        console: rich.console.Console | None = None,
        error_console: rich.console.Console | None = None,
        interval: float = DEFAULT_INTERVAL,
    ):
        self.state = "starting"
        self.table = StatusTable(commands)
        self.supervisor = Supervisor(self.table, env)
        self.renderer = Renderer(self.table, console, interval)
        self.error_console = error_console

    def _transition(self, state: RunState):
        logger.info("%s -> %s", self.state, state)
        self.state = state

    def run(self) -> int:
        try:
            self.supervisor.launch()
            self.renderer.start()

            self._transition("running")
            self.supervisor.join()
        except BaseException:
            # Leave the terminal in a usable state before the error propagates.
            self.renderer.finish()
            self.supervisor.close(kill_workers=True)
            raise

        self._transition("draining")
        self.renderer.finish()
        has_failures = self.table.has_failures()

        if has_failures:
            report_errors(self.table.snapshot(), self.error_console)

        self._transition("done")
        return 1 if has_failures else 0
