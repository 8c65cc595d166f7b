import argparse
from dataclasses import dataclass, field
import importlib.metadata
import shutil
import sys
import textwrap

from samtid.logutils import logger


@dataclass
class SamtidNamespace:
    """Wrapper for the arguments parsed by argparse. Improves ergonomics when working
    with the arguments."""

    commands: list[str] = field(default_factory=list)


class SamtidHelpFormatter(argparse.RawDescriptionHelpFormatter):
    formatting_width = 80

    def __init__(self, prog):
        terminal_cols, terminal_rows = shutil.get_terminal_size()
        self.formatting_width = min(terminal_cols, self.formatting_width)

        indent_increment = 2
        max_help_position = 24

        super().__init__(
            prog, indent_increment, max_help_position, self.formatting_width
        )

    def _fill_text(self, text, width, indent):
        # Assuming main description starts with a newline
        if text.startswith("\n"):
            return "\n".join(
                [
                    "\n".join(textwrap.wrap(line, width=width))
                    for line in text.splitlines(keepends=True)
                ]
            )
        return argparse.HelpFormatter._fill_text(self, text, width, indent)


class SamtidArgumentParser(argparse.ArgumentParser):
    """Exits with 1 instead of argparse's 2 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def get_version() -> str:
    try:
        return importlib.metadata.version("samtid")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def create_argument_parser() -> SamtidArgumentParser:
    logger.info("Creating argument parser")

    parser = SamtidArgumentParser(
        prog="samtid",
        formatter_class=SamtidHelpFormatter,
        description="""
Run shell commands at the same time and show their progress.

Run three commands:
 %(prog)s -c "npm run lint" -c "npm test" -c "npm run build"

Same thing:
 %(prog)s -c "npm run lint" "npm test" "npm run build"
""",
    )

    parser._optionals.title = "OPTIONS"

    parser.add_argument(
        "-c",
        "--command",
        nargs="+",
        action="extend",
        dest="commands",
        required=True,
        metavar="COMMAND",
        help="Queue a shell command. Can be given several times.",
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {get_version()}",
        help="Show version string and exit.",
    )

    return parser


def parse_arguments(
    parser: argparse.ArgumentParser, argv: list[str] | None = None
) -> SamtidNamespace:
    """Parse the arguments. Empty command strings are dropped."""
    args_namespace = parser.parse_args(argv)
    return SamtidNamespace(commands=[c for c in args_namespace.commands if c])
