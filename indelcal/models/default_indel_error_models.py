"""
The built-in indel error models. Each function builds a new, unfinalized rate table from the
constants in common.constants_and_defaults.
"""

import logging
import math

from ..common import (LOG_LINEAR_LOW_ERROR_RATE, LOG_LINEAR_HIGH_ERROR_RATE, LOG_LINEAR_SWITCH_POINT,
                      ADAPTIVE_NON_STR_RATE, ADAPTIVE_DEFAULT_PARAMETERS)
from .adaptive_model import AdaptiveIndelErrorModel, AdaptiveIndelErrorModelLogParams
from .rate_table import IndelErrorRateSet

__all__ = [
    "get_log_linear_indel_error_model",
    "get_simplified_adaptive_parameters"
]

_LOG = logging.getLogger(__name__)


def get_log_linear_indel_error_model() -> IndelErrorRateSet:
    """
    Simple log-linear error ramp as a function of homopolymer length. This was the default model
    in the v2.7.x release series. It covers homopolymers only and reaches the constant high error
    rate at a homopolymer length of switch point + 1.

    :return: The unfinalized rate table
    """
    log_low_error_rate = math.log(LOG_LINEAR_LOW_ERROR_RATE)
    log_high_error_rate = math.log(LOG_LINEAR_HIGH_ERROR_RATE)

    rates = IndelErrorRateSet()
    repeat_unit_length = 1
    for repeat_count in range(1, LOG_LINEAR_SWITCH_POINT + 2):
        high_error_frac = min(repeat_count - 1, LOG_LINEAR_SWITCH_POINT) / LOG_LINEAR_SWITCH_POINT
        log_error_rate = (1. - high_error_frac) * log_low_error_rate + high_error_frac * log_high_error_rate
        error_rate = math.exp(log_error_rate)
        rates.add_rate(repeat_unit_length, repeat_count, error_rate, error_rate)

    _LOG.debug(f"Built log-linear indel error model: {rates}")
    return rates


def get_simplified_adaptive_parameters() -> IndelErrorRateSet:
    """
    Single rate for the non-STR state (repeat count 1) and a log-linear ramp above it, for
    homopolymers and dinucleotide repeats. Insertion and deletion rates are not yet distinguished.

    :return: The unfinalized rate table
    """
    rates = IndelErrorRateSet()

    for repeat_unit_length, (log_low_error_rate, log_high_error_rate, switch_point) \
            in ADAPTIVE_DEFAULT_PARAMETERS.items():
        indel_error_model = AdaptiveIndelErrorModel(
            repeat_unit_length,
            switch_point,
            AdaptiveIndelErrorModelLogParams(log_error_rate=log_low_error_rate),
            AdaptiveIndelErrorModelLogParams(log_error_rate=log_high_error_rate)
        )

        rates.add_rate(repeat_unit_length, 1, ADAPTIVE_NON_STR_RATE, ADAPTIVE_NON_STR_RATE)
        for repeat_count in range(2, switch_point + 1):
            error_rate = indel_error_model.error_rate(repeat_count)
            rates.add_rate(repeat_unit_length, repeat_count, error_rate, error_rate)

    _LOG.debug(f"Built simplified adaptive indel error model: {rates}")
    return rates
