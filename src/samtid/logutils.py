import datetime
import logging
import os

import rich.logging

from samtid.output.output import error_console

DEBUG_ENVIRONMENT_VARIABLE = "DEBUG_SAMTID"

FILE_LOG_FORMAT = (
    "%(asctime)s | %(threadName)s | %(levelname)-8s | %(filename)s:%(lineno)d"
    " | %(message)s"
)


def __getattr__(name):
    if name == "logger":
        return logging.getLogger("samtid")
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def create_console_handler() -> logging.Handler:
    """
    Log to the error console. The console looks up sys.stderr on every write, so log
    lines emitted while the status display is live end up above the block instead of
    inside it.
    """
    handler = rich.logging.RichHandler(
        console=error_console,
        show_path=True,
        log_time_format="%H:%M:%S.%f",
        markup=False,
    )
    handler.setLevel(logging.DEBUG)
    return handler


def create_file_handler() -> logging.Handler:
    iso_datetime = datetime.datetime.now().isoformat(timespec="seconds")
    handler = logging.FileHandler(f"debug_{iso_datetime}.log")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))

    # Create symlink to latest log
    latest_log_link = "debug_latest.log"
    if os.path.lexists(latest_log_link):
        os.unlink(latest_log_link)
    os.symlink(f"debug_{iso_datetime}.log", latest_log_link)

    return handler


def setup_logging():
    """
    Logging is off unless DEBUG_SAMTID is set. Any value logs to stderr; a value
    containing "file" also logs to a file, and "silent" logs only to the file.
    """
    debug = os.environ.get(DEBUG_ENVIRONMENT_VARIABLE, "").lower()

    logger = logging.getLogger("samtid")

    if not debug:
        logger.disabled = True
        return

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    if "silent" not in debug:
        logger.addHandler(create_console_handler())

    if "file" in debug or "silent" in debug:
        logger.addHandler(create_file_handler())

    logger.debug("Debug logging enabled")
