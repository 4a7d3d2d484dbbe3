"""
Command line interface for querying an indel error model.
"""

import argparse
import sys

from ...calibration import Options, indel_error_rate_runner
from ...calibration.options import INDEL_TYPES
from .base import BaseCommand
from .options import model_group


class Command(BaseCommand):
    """
    Prints the reference to indel and indel to reference error probabilities of one indel, given
    its type and repeat context. The query comes from a yaml config (-c) or from the options below.
    """
    name = "indel-error-rate"
    description = "Query the error probabilities of an indel in a repeat context."

    def add_arguments(self, parser: argparse.ArgumentParser):
        """
        Add the command's arguments to its parser

        :param parser: The parser to add arguments to.
        """
        parser.add_argument(
            "-c", "--config",
            metavar="config",
            type=str,
            required=False,
            help="Path to a yaml config holding the model and the query. Overrides the other options."
        )
        parser.add_argument('-t', '--indel-type',
                            dest="indel_type",
                            choices=INDEL_TYPES,
                            default='insert',
                            help="Type of the indel [insert]")
        parser.add_argument('-u', '--repeat-unit-length',
                            dest="repeat_unit_length",
                            type=int,
                            default=1,
                            help="Length of the repeat unit [1]")
        parser.add_argument('-r', '--ref-repeat-count',
                            dest="ref_repeat_count",
                            type=int,
                            default=1,
                            help="Repeat count of the reference allele [1]")
        parser.add_argument('-i', '--indel-repeat-count',
                            dest="indel_repeat_count",
                            type=int,
                            default=1,
                            help="Repeat count of the indel allele [1]")
        parser.add_argument('--candidate',
                            action='store_true',
                            default=False,
                            help="Query the candidate generation rates instead of the calling rates.")

        model_group.add_to_parser(parser)

    def execute(self, arguments: argparse.Namespace):
        """
        Execute the command.

        :param arguments: The namespace with arguments and their values.
        """
        if arguments.config:
            options = Options.from_yaml(arguments.config)
        else:
            options = Options(
                indel_error_model=arguments.model_name,
                indel_error_model_file=arguments.model_file or None,
                repeat_unit_length=arguments.repeat_unit_length,
                ref_repeat_count=arguments.ref_repeat_count,
                indel_repeat_count=arguments.indel_repeat_count,
                indel_type=arguments.indel_type,
                candidate_rates=arguments.candidate
            )
            options.log_configuration()

        ref_to_indel, indel_to_ref = indel_error_rate_runner(options)
        sys.stdout.write(f"{ref_to_indel:.6g}\t{indel_to_ref:.6g}\n")
