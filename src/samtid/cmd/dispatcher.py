import argcomplete

from samtid.cmd.argument_parsing import create_argument_parser, parse_arguments
from samtid.core.orchestrator import Orchestrator
from samtid.core.process import command_environment
from samtid.logutils import logger
from samtid.output.output import isatty


def samtid(argv: list[str] | None = None) -> int:
    """Entry point for the samtid command line interface."""
    parser = create_argument_parser()
    argcomplete.autocomplete(parser)
    args = parse_arguments(parser, argv)

    logger.info("Commands: %s", args.commands)

    orchestrator = Orchestrator(args.commands, env=command_environment(isatty))
    return orchestrator.run()
