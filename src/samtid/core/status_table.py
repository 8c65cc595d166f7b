from collections.abc import Iterable

from samtid.core.common_types import CommandStatus, Entry, StatusTransitionError


class StatusTable:
    """
    The status of every command, in the order the commands were given.

    Entries are immutable and each update replaces one list item, so a snapshot taken
    from another thread never sees a half-written entry. Each entry has a single
    writer; there is no locking.
    """

    _entries: list[Entry]

    def __init__(self, commands: Iterable[str]):
        self._entries = [Entry(i, command) for i, command in enumerate(commands)]

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"StatusTable({[(e.command, e.state) for e in self._entries]})"

    def set(self, index: int, status: CommandStatus) -> Entry:
        current = self._entries[index]
        if current.is_terminal:
            raise StatusTransitionError(
                f"Command {index} ({current.command!r}) is already {current.state}"
            )
        entry = Entry(
            index,
            current.command,
            "succeeded" if status.rc == 0 else "failed",
            status,
        )
        self._entries[index] = entry
        return entry

    def snapshot(self) -> list[Entry]:
        return list(self._entries)

    def all_terminal(self) -> bool:
        return all(e.is_terminal for e in self._entries)

    def failed(self) -> list[Entry]:
        return [e for e in self._entries if e.state == "failed"]

    def has_failures(self) -> bool:
        return any(e.state == "failed" for e in self._entries)
