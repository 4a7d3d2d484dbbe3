"""
Command line interface for writing out the rate table of an indel error model.
"""

import argparse

from ...calibration import show_rates_runner
from ...models import parse_model_spec
from .base import BaseCommand
from .options import model_group, output_group


class Command(BaseCommand):
    """
    Writes the finalized rate table of an indel error model, one row per repeat unit length and
    repeat count, to <output_dir>/<prefix>.indel_error_rates.tsv
    """
    name = "show-rates"
    description = "Write the indel error rate table of a built-in or calibrated model."

    def add_arguments(self, parser: argparse.ArgumentParser):
        """
        Add the command's arguments to its parser

        :param parser: The parser to add arguments to
        """
        parser.add_argument('--candidate',
                            required=False,
                            action='store_true',
                            default=False,
                            help="Write the candidate generation rates instead of the calling rates.")

        parser.add_argument('--compress',
                            required=False,
                            action='store_true',
                            default=False,
                            help="bgzip the output table.")

        parser.add_argument('--overwrite',
                            required=False,
                            action='store_true',
                            default=False,
                            help="Overwrite previous output files. "
                                 "Default is to throw an error if the file already exists.")

        model_group.add_to_parser(parser)
        output_group.add_to_parser(parser)

    def execute(self, arguments: argparse.Namespace):
        """
        Execute the command

        :param arguments: The namespace with arguments and their values.
        """
        show_rates_runner(
            parse_model_spec(arguments.model_name, arguments.model_file),
            arguments.candidate,
            arguments.output_dir,
            arguments.prefix,
            arguments.overwrite,
            arguments.compress
        )
