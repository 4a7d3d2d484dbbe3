"""
Runners for the indel error model commands. These build the model from the inputs and either
write out its rate table or answer one query.
"""

import logging

from pathlib import Path

from ..common import open_output, validate_output_path
from ..models import IndelErrorModel, ModelSpec
from ..variants import IndelKey, RepeatContext
from .options import Options

__all__ = [
    "show_rates_runner",
    "indel_error_rate_runner",
    "indel_key_for_type"
]

_LOG = logging.getLogger(__name__)

RATE_TABLE_HEADER = ("repeat_unit_length", "repeat_count", "insertion_rate", "deletion_rate")


def indel_key_for_type(indel_type: str, repeat_unit_length: int = 1) -> IndelKey:
    """
    A representative indel of the given type, one repeat unit long. Only its type matters to the model.

    :param indel_type: insert, delete or complex
    :param repeat_unit_length: Length of the repeat unit
    """
    unit_length = max(repeat_unit_length, 1)
    if indel_type == 'insert':
        return IndelKey(0, 0, "N" * unit_length)
    if indel_type == 'delete':
        return IndelKey(0, unit_length)
    return IndelKey(0, unit_length, "N")


def show_rates_runner(model_spec: ModelSpec,
                      candidate: bool,
                      output_dir: str | Path,
                      prefix: str,
                      overwrite: bool = False,
                      compress: bool = False) -> Path:
    """
    Write the finalized rate table of a model as a tab separated file.

    :param model_spec: The model to build
    :param candidate: Set to write the candidate generation rates instead of the calling rates
    :param output_dir: Directory to write to
    :param prefix: Prefix for the output file name
    :param overwrite: Set to replace an existing output file
    :param compress: Set to bgzip the output
    :return: The path of the file written
    """
    validate_output_path(output_dir, is_file=False)
    output_file = Path(output_dir) / f"{prefix}.indel_error_rates.tsv{'.gz' if compress else ''}"
    validate_output_path(output_file, is_file=True, overwrite=overwrite)

    model = IndelErrorModel.from_spec(model_spec)
    rates = model.candidate_rates if candidate else model.calling_rates

    num_rows = 0
    with open_output(output_file) as handle:
        handle.write("\t".join(RATE_TABLE_HEADER) + "\n")
        for repeat_unit_length, repeat_count, insert_rate, delete_rate in rates.iter_rates():
            handle.write(f"{repeat_unit_length}\t{repeat_count}\t{insert_rate:.6g}\t{delete_rate:.6g}\n")
            num_rows += 1

    _LOG.info(f"Wrote {num_rows} {'candidate' if candidate else 'calling'} rates to {output_file}")
    return output_file


def indel_error_rate_runner(options: Options) -> tuple[float, float]:
    """
    Build the configured model and query it once.

    :param options: The checked options
    :return: (reference to indel error probability, indel to reference error probability)
    """
    model = IndelErrorModel.from_spec(options.model_spec)
    indel_key = indel_key_for_type(options.indel_type, options.repeat_unit_length)
    repeat_info = RepeatContext(options.repeat_unit_length, options.ref_repeat_count, options.indel_repeat_count)

    ref_to_indel, indel_to_ref = model.get_indel_error_rate(indel_key, repeat_info, options.candidate_rates)
    _LOG.info(f"{options.indel_type} in {repeat_info}: ref->indel error {ref_to_indel:.6g}, "
              f"indel->ref error {indel_to_ref:.6g}")
    return ref_to_indel, indel_to_ref
