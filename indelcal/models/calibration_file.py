"""
Reads indel error models from a JSON calibration file. The file holds a list of named models
under "IndelModels". Each model gives its dimensions and a matrix of [deletion, insertion] error
rate pairs, indexed by repeat unit length, then by tract length in bases:

    "Model": [[[del_hpol1, ins_hpol1], [del_hpol2, ins_hpol2], ...],      # unit length 1
              [[del_dinuc1, ins_dinuc1], [del_dinuc2, ins_dinuc2], ...],  # unit length 2
              ...]

Only tract lengths that are a whole number of repeat units become table entries.
"""

import json
import logging

from pathlib import Path
from typing import Any

from ..common import (open_input, UnknownModelError, MalformedModelFileError, INDEL_MODELS_KEY,
                      MODEL_NAME_KEY, MAX_MOTIF_LENGTH_KEY, MAX_TRACT_LENGTH_KEY, MODEL_KEY, TABLE_KEYS)
from .rate_table import IndelErrorRateSet

__all__ = [
    "ModelMetadata",
    "deserialize_rate_set",
    "load_rate_set"
]

_LOG = logging.getLogger(__name__)


class ModelMetadata:
    """
    Descriptive fields of one model block in a calibration file.

    :param name: The name the model is selected by
    :param fields: Every other field of the block that is not part of the rate table
    """
    def __init__(self, name: str | None = None, fields: dict[str, Any] | None = None):
        self.name = name
        self.fields = fields or {}

    @classmethod
    def deserialize(cls, model_block: dict) -> "ModelMetadata":
        if not isinstance(model_block, dict):
            raise MalformedModelFileError(f"Expected a model block, found {type(model_block).__name__}")
        fields = {key: value for key, value in model_block.items()
                  if key not in TABLE_KEYS and key != MODEL_NAME_KEY}
        return cls(model_block.get(MODEL_NAME_KEY), fields)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.name!r})'


def _read_dimension(model_block: dict, key: str) -> int:
    value = model_block.get(key)
    # bool is an int subclass, but never a valid dimension
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        _LOG.error(f"'{key}' must be a non-negative integer (found: {value!r})")
        raise MalformedModelFileError(f"'{key}' must be a non-negative integer (found: {value!r})")
    return value


def _read_cell(cell: Any, repeat_unit_length: int, tract_length: int) -> tuple[float, float]:
    if not isinstance(cell, list) or len(cell) != 2 \
            or not all(isinstance(rate, (int, float)) and not isinstance(rate, bool) for rate in cell):
        mssg = f"Indel model entry for repeat unit length {repeat_unit_length}, tract length {tract_length} " \
               f"must be a [deletion_rate, insertion_rate] pair (found: {cell!r})"
        _LOG.error(mssg)
        raise MalformedModelFileError(mssg)
    return float(cell[0]), float(cell[1])


def deserialize_rate_set(model_block: dict) -> IndelErrorRateSet:
    """
    Convert one model block of a calibration file into a rate table.

    :param model_block: The decoded JSON object for the model
    :return: The unfinalized rate table
    """
    max_repeat_unit_length = _read_dimension(model_block, MAX_MOTIF_LENGTH_KEY)
    max_tract_length = _read_dimension(model_block, MAX_TRACT_LENGTH_KEY)
    models = model_block.get(MODEL_KEY)

    if not isinstance(models, list) or len(models) != max_repeat_unit_length:
        mssg = f"Unexpected repeating pattern size in indel model: {MAX_MOTIF_LENGTH_KEY} is " \
               f"{max_repeat_unit_length}, but the model has " \
               f"{len(models) if isinstance(models, list) else 'no'} pattern sizes"
        _LOG.error(mssg)
        raise MalformedModelFileError(mssg)

    rates = IndelErrorRateSet()

    for repeat_unit_length in range(1, max_repeat_unit_length + 1):
        pattern = models[repeat_unit_length - 1]

        if not isinstance(pattern, list) or len(pattern) > max_tract_length:
            mssg = f"Unexpected tract length in indel model for repeat unit length {repeat_unit_length}: " \
                   f"{MAX_TRACT_LENGTH_KEY} is {max_tract_length}"
            _LOG.error(mssg)
            raise MalformedModelFileError(mssg)

        for tract_length in range(1, len(pattern) + 1):
            if tract_length % repeat_unit_length != 0:
                continue
            repeat_count = tract_length // repeat_unit_length
            delete_rate, insert_rate = _read_cell(pattern[tract_length - 1], repeat_unit_length, tract_length)
            rates.add_rate(repeat_unit_length, repeat_count, insert_rate, delete_rate)

    return rates


def load_rate_set(model_filename: str | Path, model_name: str) -> tuple[IndelErrorRateSet, ModelMetadata]:
    """
    Find the named model in a calibration file and read its rate table. The first model with a
    matching name is used.

    :param model_filename: Path to the JSON calibration file, optionally gzipped
    :param model_name: The name of the model to read
    :return: The unfinalized rate table and the metadata of the model
    """
    _LOG.info(f"Reading indel error model '{model_name}' from '{model_filename}'")
    with open_input(model_filename) as handle:
        try:
            root = json.load(handle)
        except json.JSONDecodeError as exc:
            _LOG.error(f"Could not decode indel model file '{model_filename}': {exc}")
            raise MalformedModelFileError(f"Could not decode indel model file '{model_filename}': {exc}") from exc

    model_blocks = root.get(INDEL_MODELS_KEY) if isinstance(root, dict) else None
    if model_blocks is not None and not isinstance(model_blocks, list):
        mssg = (f"'{INDEL_MODELS_KEY}' in indel model file '{model_filename}' must be a list of models "
                f"(found: {type(model_blocks).__name__})")
        _LOG.error(mssg)
        raise MalformedModelFileError(mssg)
    for model_block in model_blocks or []:
        metadata = ModelMetadata.deserialize(model_block)
        if metadata.name != model_name:
            continue
        return deserialize_rate_set(model_block), metadata

    mssg = f"unrecognized indel error model name: '{model_name}' in model file '{model_filename}'"
    _LOG.error(mssg)
    raise UnknownModelError(mssg)
