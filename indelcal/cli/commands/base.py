"""Base classes for indelcal subcommands and their shared options."""

import abc
import argparse
from typing import Any

__all__ = ["BaseCommand", "Group", "Option"]


class Option:
    """
    An option that can be added to several subcommands

    :param args: The option strings, e.g., '-f', '--model-file'
    :param kwargs: Any named arguments accepted by argparse.add_argument()
    """

    def __init__(self, *args: str, **kwargs: Any):
        self.args: tuple[str, ...] = args
        self.kwargs: dict[str, Any] = kwargs

    def add_to_parser(self, parser: argparse.ArgumentParser | argparse._ArgumentGroup):
        parser.add_argument(*self.args, **self.kwargs)


class Group:
    """
    A named group of options that can be added to several subcommands.

    :param name: Title of the group in the help output
    :param description: Description of the group
    """
    def __init__(self, name: str, description: str | None = None):
        self.name = name
        self.description = description
        self.options: list[Option] = []

    def add_argument(self, *args: str, **kwargs: Any):
        """
        Add an option to the group

        :param args: The option strings
        :param kwargs: Any named arguments accepted by argparse.add_argument()
        """
        self.options.append(Option(*args, **kwargs))

    def add_to_parser(self, parser: argparse.ArgumentParser):
        group = parser.add_argument_group(title=self.name, description=self.description)
        for option in self.options:
            option.add_to_parser(group)


class BaseCommand(abc.ABC):
    """
    A CLI subcommand. Every module in indelcal.cli.commands that defines a `Command` subclass of this
    is registered as a subcommand.

    :param parser: The subcommand's argument parser.
    """
    name: str | None = None
    """
    Name of the subcommand. Defaults to the module name.
    """

    description: str | None = None
    """
    The subcommand's help string. If not given, __doc__ will be used.
    """

    def __init__(self, parser: argparse.ArgumentParser):
        self.add_arguments(parser)

    @abc.abstractmethod
    def add_arguments(self, parser: argparse.ArgumentParser):
        """
        Add arguments to the subcommand's argument parser.

        :param parser: The parser to add arguments to
        """

    @abc.abstractmethod
    def execute(self, arguments: argparse.Namespace):
        """
        Execute the command.

        :param arguments: The namespace with arguments and their values.
        """

    @classmethod
    def register_to(cls, subparsers: argparse._SubParsersAction, name: str | None = None):
        """
        Add this command's parser to the main parser's subparsers.

        :param subparsers: argparse object holding the subparsers.
        :param name: Name of the subcommand. Defaults to the class attribute `name`.
        """
        cmd_name = name or cls.name
        help_text = cls.description or cls.__doc__
        parser = subparsers.add_parser(cmd_name, description=help_text, help=help_text)
        command = cls(parser)
        parser.set_defaults(cmd_handler=command.execute, cmd_name=cmd_name)
