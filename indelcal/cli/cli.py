"""
The indelcal command line. Global options control the run log; every module in
indelcal.cli.commands that defines a `Command` becomes a subcommand, e.g.

    indelcal --log-level DEBUG show-rates -m adaptiveDefault -o out/
    indelcal indel-error-rate -m logLinear -t insert -r 1 -i 16
"""

import argparse
import importlib
import logging
import pkgutil
import sys
import time
import traceback

from typing import Final

from ..common import setup_logging
from .commands import BaseCommand
from .commands.options import log_group

__all__ = ['Cli', 'main', 'run']

log = logging.getLogger("indelcal")

COMMANDS_MODULE_PATH: Final = importlib.import_module("indelcal.cli.commands").__path__


class Cli:
    """
    indelcal command line interface. The registered subcommand names are kept in `commands`.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="indelcal",
            description="Build indel sequencing error models and query their error rates"
        )
        log_group.add_to_parser(self.parser)
        self.subparsers = self.parser.add_subparsers(title="commands", metavar="COMMAND")
        self.commands: list[str] = []

        for _, name, _ in pkgutil.iter_modules(COMMANDS_MODULE_PATH):
            module = importlib.import_module(f"indelcal.cli.commands.{name}")
            command = getattr(module, "Command", None)
            if command is not None:
                self.register_command(command, command.name or name)

        self.parser.epilog = f"Run 'indelcal COMMAND --help' for the options of {', '.join(self.commands)}."

    def register_command(self, command: type[BaseCommand], name: str | None):
        """
        Register a subcommand

        :param command: The command class to register
        :param name: The name of the subcommand. If not given, `command.name` will be used
        """
        command.register_to(self.subparsers, name)
        self.commands.append(name or command.name)


def main(parser: argparse.ArgumentParser, arguments: list[str]) -> int:
    """
    Parse the arguments, set up the run log and run the chosen subcommand.

    :param parser: The argument parser
    :param arguments: The list of command line arguments
    :return: 0 on success, 1 if no subcommand was given or the subcommand failed, 2 if the
        arguments could not be parsed
    """
    try:
        args = parser.parse_args(arguments)
    except SystemExit:
        return 2

    if getattr(args, "cmd_handler", None) is None:
        parser.print_help()
        return 1

    log_file = setup_logging(
        omit_log=args.no_log,
        severity=args.log_level,
        verbosity=args.log_detail,
        directory=args.log_dir,
        filename=args.log_name,
        silent_mode=args.silent_mode
    )
    if log_file:
        log.debug(f"Writing run log to {log_file}")

    start = time.time()
    try:
        args.cmd_handler(args)
    except Exception as exc:
        log.exception(f"{args.cmd_name} failed, see the traceback below")
        print(f"ERROR: {args.cmd_name} failed, showing the last error")
        traceback.print_exception(exc, chain=False)
        return 1
    log.info(f"{args.cmd_name} finished in {time.time() - start:.2f} s")
    return 0


def run():
    """
    Console script entry point
    """
    sys.exit(main(Cli().parser, sys.argv[1:]))
