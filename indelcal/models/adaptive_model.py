"""
Adaptive indel error model. Error rates are interpolated in log space between a low anchor at the
first repeat count above the non-repeat state, and a high anchor at a switch point, past which the
rate stays at the high anchor.
"""

import math

from dataclasses import dataclass

from ..common import ADAPTIVE_LOW_REPEAT_COUNT

__all__ = [
    "AdaptiveIndelErrorModelLogParams",
    "AdaptiveIndelErrorModel",
    "linear_fit"
]


@dataclass(frozen=True)
class AdaptiveIndelErrorModelLogParams:
    """
    Log space parameters at one anchor of the adaptive model.

    :param log_error_rate: Log of the indel error rate
    :param log_noisy_locus_rate: Log of the rate at which a locus is noisy
    """
    log_error_rate: float = 0.
    log_noisy_locus_rate: float = 0.


def linear_fit(x: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Evaluate the line through (x1, y1) and (x2, y2) at x.
    """
    assert x1 != x2
    return ((y2 - y1) * x + (x2 * y1 - x1 * y2)) / (x2 - x1)


class AdaptiveIndelErrorModel:
    """
    Log-linear ramp for a single repeat unit length.

    :param repeat_unit_length: The repeat unit length the model covers
    :param high_repeat_count: The repeat count at which the high anchor is reached
    :param low_log_params: Parameters at the low anchor, repeat count 2
    :param high_log_params: Parameters at the high anchor
    """
    low_repeat_count = ADAPTIVE_LOW_REPEAT_COUNT

    def __init__(self,
                 repeat_unit_length: int,
                 high_repeat_count: int,
                 low_log_params: AdaptiveIndelErrorModelLogParams,
                 high_log_params: AdaptiveIndelErrorModelLogParams):
        self.repeat_unit_length = repeat_unit_length
        self.high_repeat_count = high_repeat_count
        self.low_log_params = low_log_params
        self.high_log_params = high_log_params

    def _interpolate(self, repeat_count: int, low_log_value: float, high_log_value: float) -> float:
        assert repeat_count > 1
        if repeat_count >= self.high_repeat_count:
            return math.exp(high_log_value)
        return math.exp(linear_fit(repeat_count,
                                   self.low_repeat_count, low_log_value,
                                   self.high_repeat_count, high_log_value))

    def error_rate(self, repeat_count: int) -> float:
        """
        The indel error rate at repeat_count, which must be greater than 1.
        """
        return self._interpolate(repeat_count,
                                 self.low_log_params.log_error_rate,
                                 self.high_log_params.log_error_rate)

    def noisy_locus_rate(self, repeat_count: int) -> float:
        """
        The noisy locus rate at repeat_count, which must be greater than 1.
        """
        return self._interpolate(repeat_count,
                                 self.low_log_params.log_noisy_locus_rate,
                                 self.high_log_params.log_noisy_locus_rate)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.repeat_unit_length}, {self.high_repeat_count})'
