"""
The indel error model queried by the caller. It holds two finalized rate tables: the calling
rates, chosen by configuration, and the candidate rates, which always come from the log-linear
model and are used to decide whether an indel is worth considering at all.

The configured model is one of a closed set of model specs, parsed once from the model name and
the optional calibration file.
"""

import logging

from dataclasses import dataclass
from pathlib import Path

from ..common import LOG_LINEAR_MODEL_NAME, ADAPTIVE_DEFAULT_MODEL_NAME, UnknownModelError
from ..variants import IndelKey, RepeatContext
from .calibration_file import ModelMetadata, load_rate_set
from .default_indel_error_models import get_log_linear_indel_error_model, get_simplified_adaptive_parameters
from .rate_table import IndelErrorRateSet, IndelErrorRateType

__all__ = [
    "LogLinearModelSpec",
    "AdaptiveDefaultModelSpec",
    "FileModelSpec",
    "ModelSpec",
    "parse_model_spec",
    "IndelErrorModel"
]

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogLinearModelSpec:
    name = LOG_LINEAR_MODEL_NAME

    def build_rates(self) -> tuple[IndelErrorRateSet, ModelMetadata | None]:
        return get_log_linear_indel_error_model(), None


@dataclass(frozen=True)
class AdaptiveDefaultModelSpec:
    name = ADAPTIVE_DEFAULT_MODEL_NAME

    def build_rates(self) -> tuple[IndelErrorRateSet, ModelMetadata | None]:
        return get_simplified_adaptive_parameters(), None


@dataclass(frozen=True)
class FileModelSpec:
    """
    A named model read from a calibration file.

    :param path: Path to the calibration file
    :param name: The name of the model in that file
    """
    path: Path
    name: str

    def build_rates(self) -> tuple[IndelErrorRateSet, ModelMetadata | None]:
        return load_rate_set(self.path, self.name)


ModelSpec = LogLinearModelSpec | AdaptiveDefaultModelSpec | FileModelSpec

BUILT_IN_MODEL_SPECS = {
    LOG_LINEAR_MODEL_NAME: LogLinearModelSpec,
    ADAPTIVE_DEFAULT_MODEL_NAME: AdaptiveDefaultModelSpec,
}


def parse_model_spec(model_name: str, model_filename: str | Path | None = None) -> ModelSpec:
    """
    Turn a model name and optional model file into a model spec.

    :param model_name: Name of a built-in model, or of a model in the model file
    :param model_filename: Path to a calibration file. Empty or None selects a built-in model.
    :return: The model spec
    """
    if isinstance(model_filename, Path) and model_filename == Path("."):
        # Path("") is Path("."), so an empty Path cannot mean "no model file"
        _LOG.error(f"indel error model file must be a file, not '{model_filename}'")
        raise ValueError(f"indel error model file must be a file, not '{model_filename}'; "
                         f"pass an empty string to use a built-in model")
    if model_filename:
        return FileModelSpec(Path(model_filename), model_name)
    if model_name not in BUILT_IN_MODEL_SPECS:
        _LOG.error(f"unrecognized indel error model name: '{model_name}'")
        raise UnknownModelError(f"unrecognized indel error model name: '{model_name}'")
    return BUILT_IN_MODEL_SPECS[model_name]()


class IndelErrorModel:
    """
    Converts the repeat context of an indel into error probabilities.

    :param model_name: Name of a built-in model ("logLinear" or "adaptiveDefault"), or of a model in the
        model file.
    :param model_filename: Path to a JSON calibration file. Leave empty to use a built-in model.
    :param model_spec: An already parsed model spec. If given, model_name and model_filename are ignored.
    """

    def __init__(self,
                 model_name: str = LOG_LINEAR_MODEL_NAME,
                 model_filename: str | Path | None = "",
                 model_spec: ModelSpec | None = None):
        if model_spec is None:
            model_spec = parse_model_spec(model_name, model_filename)
        self.model_spec = model_spec
        self.calling_rates, self.metadata = model_spec.build_rates()
        self.calling_rates.finalize_rates()
        _LOG.info(f"Using indel error model '{model_spec.name}' for calling rates")

        # the indel candidate model always uses the v2.7.x log-linear indel error ramp
        self.candidate_rates = get_log_linear_indel_error_model()
        self.candidate_rates.finalize_rates()

    @classmethod
    def from_spec(cls, model_spec: ModelSpec) -> "IndelErrorModel":
        """
        Build the model directly from a parsed model spec.
        """
        return cls(model_spec=model_spec)

    def get_indel_error_rate(self,
                             indel_key: IndelKey,
                             repeat_info: RepeatContext,
                             is_candidate_rates: bool = False) -> tuple[float, float]:
        """
        Error probabilities for an indel allele.

        :param indel_key: The indel, used to decide if it is an insertion, deletion or complex indel
        :param repeat_info: Repeat context of the indel
        :param is_candidate_rates: Set to use the candidate generation rates instead of the calling rates
        :return: The probability of an error turning the reference into the indel allele, and the
            probability of an error turning the indel allele into the reference
        """
        error_rates = self.candidate_rates if is_candidate_rates else self.calling_rates
        indel_type = IndelErrorRateType.from_indel_key(indel_key)

        if indel_type == IndelErrorRateType.COMPLEX:
            # TODO: complex indels use the baseline until they have their own estimates
            ref_to_indel_error_prob = max(error_rates.get_rate(1, 1, IndelErrorRateType.INSERT),
                                          error_rates.get_rate(1, 1, IndelErrorRateType.DELETE))
            return ref_to_indel_error_prob, ref_to_indel_error_prob

        repeat_unit_length = max(repeat_info.repeat_unit_length, 1)
        ref_repeat_count = max(repeat_info.ref_repeat_count, 1)
        indel_repeat_count = max(repeat_info.indel_repeat_count, 1)

        ref_to_indel_error_prob = error_rates.get_rate(repeat_unit_length, ref_repeat_count, indel_type)
        # The reverse error happens on the indel allele, so it uses the repeat count after the indel
        indel_to_ref_error_prob = error_rates.get_rate(repeat_unit_length, indel_repeat_count,
                                                       indel_type.opposite())
        return ref_to_indel_error_prob, indel_to_ref_error_prob

    def __repr__(self):
        return f'{self.__class__.__name__}({self.model_spec!r})'
