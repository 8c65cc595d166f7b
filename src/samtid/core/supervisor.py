import signal
from typing import TYPE_CHECKING, Callable, Mapping
import warnings

from samtid.core.common_types import CommandStatus, Entry
from samtid.core.process import run_shell_command
from samtid.core.status_table import StatusTable
from samtid.logutils import logger

if TYPE_CHECKING:
    from loky import Future, ProcessPoolExecutor  # type: ignore

CommandStatusListener = Callable[[Entry], None]


# Suppress the loky warning about the fork start method. Workers only start shell
# commands and never touch the state that was inherited from the parent.
warnings.filterwarnings(
    "ignore",
    message="`fork` start method should not be used with `loky`",
    category=UserWarning,
)


def init_worker():
    """Ignore CTRL+C in the worker process."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def status_from_future(future: "Future") -> CommandStatus:
    try:
        status = future.result()
    except Exception as e:
        logger.debug("Worker raised %r", e)
        return CommandStatus(1, "Command failed with exception.", f"{e}")
    assert isinstance(status, CommandStatus)
    return status


class Supervisor:
    """
    Runs every command in the table at the same time, one worker process per command,
    and records the results in the table as they come in.

    The table is only written from the thread that calls launch() and join().
    """

    table: StatusTable
    env: Mapping[str, str] | None
    command_status_listener: CommandStatusListener

    def __init__(self, table: StatusTable, env: Mapping[str, str] | None = None):
        self.table = table
        self.env = env
        self.command_status_listener = lambda *args: None
        self._pools: list["ProcessPoolExecutor"] = []
        self._futures: dict["Future", int] = {}

    def launch(self):
        from loky import ProcessPoolExecutor  # type: ignore
        from loky.backend import get_context  # type: ignore

        entries = self.table.snapshot()
        if not entries:
            logger.debug("No commands to launch")
            return

        logger.info("Launching %d commands", len(entries))

        # One single-worker executor per command. loky marks every future of an
        # executor as failed when one of its workers dies, so a shared pool would let
        # one command take down the others.
        for entry in entries:
            try:
                pool = ProcessPoolExecutor(
                    max_workers=1,
                    initializer=init_worker,
                    context=get_context("fork"),
                )
                self._pools.append(pool)
                future = pool.submit(run_shell_command, entry.command, self.env)
            except Exception as e:
                logger.debug("Could not submit %r: %r", entry.command, e)
                self._record(
                    entry.index, CommandStatus(1, "Could not start command.", f"{e}")
                )
                continue
            self._futures[future] = entry.index

    def join(self) -> StatusTable:
        """
        Wait until every command has finished and its status has been recorded. Returns
        the table, which is final from here on.
        """
        from loky import wait  # type: ignore

        try:
            while self._futures:
                completed, _ = wait(list(self._futures), return_when="FIRST_COMPLETED")
                for future in completed:
                    index = self._futures.pop(future)
                    self._record(index, status_from_future(future))
        finally:
            self.close(kill_workers=bool(self._futures))

        assert self.table.all_terminal()
        return self.table

    def close(self, kill_workers: bool = False):
        while self._pools:
            self._pools.pop().shutdown(wait=True, kill_workers=kill_workers)

    def _record(self, index: int, status: CommandStatus):
        entry = self.table.set(index, status)
        logger.debug(
            "Command %d (%s) %s with rc %d", index, entry.command, entry.state, status.rc
        )
        self.command_status_listener(entry)
