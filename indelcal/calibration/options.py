"""
Class for parsing the indel error model config file. The config is a yaml file read with pyyaml.
Each entry is checked against a definition giving its type, default and allowed range before it
replaces the default.

A config looks like:

    indel_error_model: adaptiveDefault
    indel_error_model_file: .
    repeat_unit_length: 1
    ref_repeat_count: 4
    indel_repeat_count: 5
    indel_type: insert
    candidate_rates: false

A value of "." leaves the default in place.
"""
import logging
import sys

from math import inf
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import yaml

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

from ..common import DEFAULT_MODEL_NAME, validate_input_path
from ..models import ModelSpec, parse_model_spec

__all__ = [
    "Options",
    "INDEL_TYPES"
]

_LOG = logging.getLogger(__name__)

INDEL_TYPES = ['insert', 'delete', 'complex']


class Options(SimpleNamespace):
    """
    Options for building and querying an indel error model.

    :param indel_error_model: Name of a built-in model, or of a model in indel_error_model_file
    :param indel_error_model_file: JSON calibration file holding the model, if not built-in
    :param repeat_unit_length: Repeat unit length of the indel to query
    :param ref_repeat_count: Repeat count of the reference allele
    :param indel_repeat_count: Repeat count of the indel allele
    :param indel_type: One of insert, delete or complex
    :param candidate_rates: Set to query the candidate generation rates instead of the calling rates
    """

    def __init__(self,
                 indel_error_model: str = DEFAULT_MODEL_NAME,
                 indel_error_model_file: Path | None = None,
                 repeat_unit_length: int = 1,
                 ref_repeat_count: int = 1,
                 indel_repeat_count: int = 1,
                 indel_type: str = 'insert',
                 candidate_rates: bool = False,
                 **kwargs: Any):
        super().__init__(**kwargs)
        self.indel_error_model: str = indel_error_model
        self.indel_error_model_file: Path | None = indel_error_model_file
        self.repeat_unit_length: int = repeat_unit_length
        self.ref_repeat_count: int = ref_repeat_count
        self.indel_repeat_count: int = indel_repeat_count
        self.indel_type: str = indel_type
        self.candidate_rates: bool = candidate_rates

    @staticmethod
    def definitions() -> dict[str, tuple]:
        """
        Definitions used to check the config. Each entry is (type, default, criteria 1, criteria 2).

        For files, criteria 1 is 'exists' to check that the file exists, and criteria 2 is None. For
        numbers, criteria 1 and 2 are the lowest and highest allowed values (inclusive). For choices,
        criteria 1 is 'choice' and criteria 2 the list of allowed values.
        """
        return {
            'indel_error_model': (str, DEFAULT_MODEL_NAME, None, None),
            'indel_error_model_file': (Path, None, 'exists', None),
            'repeat_unit_length': (int, 1, 0, inf),
            'ref_repeat_count': (int, 1, 0, inf),
            'indel_repeat_count': (int, 1, 0, inf),
            'indel_type': (str, 'insert', 'choice', INDEL_TYPES),
            'candidate_rates': (bool, False, None, None),
        }

    @classmethod
    def from_yaml(cls, config_file: str | Path) -> "Options":
        """
        Read and check a config file, filling in defaults for anything it leaves out.

        :param config_file: Path to the yaml config
        :return: The checked options
        """
        validate_input_path(config_file)
        defs = cls.definitions()
        args = {key: default for key, (_, default, _, _) in defs.items()}
        args.update(cls.read_yaml(config_file, defs))
        options = cls(**args)
        options.log_configuration()
        return options

    @staticmethod
    def check_and_log_error(keyname: str, value_to_check, crit1, crit2):
        if value_to_check is None:
            pass
        elif crit1 == "exists":
            validate_input_path(value_to_check)
        elif crit1 == "choice":
            if value_to_check not in crit2:
                _LOG.error(f"`{keyname}` must be one of {crit2} (input: {value_to_check})")
                sys.exit(1)
        elif isinstance(crit1, (int, float)) and isinstance(crit2, (int, float)):
            if not (crit1 <= value_to_check <= crit2):
                _LOG.error(f'`{keyname}` must be between {crit1} and {crit2} (input: {value_to_check}).')
                sys.exit(1)

    @classmethod
    def read_yaml(cls, config_yaml: str | Path, defs: dict[str, tuple]) -> dict[str, Any]:
        """
        Read the config and return the checked entries it sets.
        """
        with open(config_yaml, 'r') as config_handle:
            config = yaml.load(config_handle, Loader=Loader) or {}

        if not isinstance(config, dict):
            _LOG.error(f"Config '{config_yaml}' must be a mapping of option names to values")
            sys.exit(1)

        args = {}
        for key, value in config.items():
            if key not in defs:
                _LOG.warning(f"Unrecognized config option `{key}`, skipping.")
                continue
            type_of_var, _, criteria1, criteria2 = defs[key]
            if value is None or value == ".":
                _LOG.debug(f"No value entered for `{key}`, using default.")
                continue

            if type_of_var == Path:
                if not isinstance(value, str):
                    _LOG.error(f"Incorrect type for value entered for {key}: {type_of_var} (found: {value})")
                    sys.exit(1)
                value = Path(value)
            # yaml already gives the right python type for well-formed input; bool is checked
            # separately because it is an int subclass
            elif not isinstance(value, type_of_var) or (type_of_var is int and isinstance(value, bool)):
                _LOG.error(f"Incorrect type for value entered for {key}: {type_of_var} (found: {value})")
                sys.exit(1)

            cls.check_and_log_error(key, value, criteria1, criteria2)
            args[key] = value
        return args

    @property
    def model_spec(self) -> ModelSpec:
        return parse_model_spec(self.indel_error_model, self.indel_error_model_file)

    def log_configuration(self):
        """
        Log the configuration for reproducibility.
        """
        _LOG.info('Run Configuration...')
        _LOG.info(f'Indel error model: {self.indel_error_model}')
        if self.indel_error_model_file:
            _LOG.info(f'Indel error model file: {self.indel_error_model_file}')
        _LOG.debug(f'Query: {self.indel_type}, repeat unit length {self.repeat_unit_length}, '
                   f'ref repeat count {self.ref_repeat_count}, indel repeat count {self.indel_repeat_count}, '
                   f'candidate rates: {self.candidate_rates}')
