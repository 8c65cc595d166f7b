"""
Run shell commands concurrently with a live status display.
"""

# PYTHON_ARGCOMPLETE_OK

from samtid.cmd.dispatcher import samtid
from samtid.logutils import logger, setup_logging
from samtid.output.output import error_console, output_error, output_warning


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    logger.info("Starting")
    try:
        return samtid(argv)
    except KeyboardInterrupt:
        output_warning("Interrupted by user. Aborting.")
        return 1
    except Exception:
        logger.exception("Unhandled exception")
        output_error("Unknown error occurred.")
        error_console.print_exception()
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
