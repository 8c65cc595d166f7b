"""
Running a single shell command. Only standard library imports here; this module is
executed in the worker processes.
"""

import os
import subprocess
from typing import Mapping

from samtid.core.common_types import CommandStatus


def command_environment(
    isatty: bool, base: Mapping[str, str] | None = None
) -> dict[str, str]:
    """
    The environment the commands are run with: the full parent environment, plus
    FORCE_COLOR=1 when our own output is a terminal and FORCE_COLOR=0 when it isn't.
    The output of the commands is captured, so tools that check for a tty would
    otherwise turn colours off. A FORCE_COLOR already present in the parent
    environment is left alone.
    """
    env = dict(os.environ if base is None else base)
    env.setdefault("FORCE_COLOR", "1" if isatty else "0")
    return env


def run_shell_command(
    command: str, env: Mapping[str, str] | None = None
) -> CommandStatus:
    """
    Run command through the shell and wait for it to finish. Standard output is
    discarded and standard error is captured.

    Never raises for a failing command; a command that can't be started is reported
    with return code 127, like the shell does for a missing executable.
    """
    try:
        process = subprocess.run(
            command,
            shell=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
            env=env,
        )
    except (OSError, ValueError) as e:
        return CommandStatus(127, "Could not start command.", f"{e}")

    return CommandStatus(process.returncode, None, process.stderr.rstrip("\n"))
