"""
Exceptions raised while building an indel error model. All of these are fatal for a run:
a missing or miscalibrated model invalidates every downstream quality score, so nothing
falls back to a different model.
"""

__all__ = [
    "IndelErrorModelError",
    "UnknownModelError",
    "MalformedModelFileError",
    "InvalidRateTableError"
]


class IndelErrorModelError(Exception):
    """Base class for indel error model failures."""


class UnknownModelError(IndelErrorModelError):
    """The requested model name is not a built-in model, or is not present in the model file."""


class MalformedModelFileError(IndelErrorModelError):
    """The calibration file does not match the dimensions it declares."""


class InvalidRateTableError(IndelErrorModelError):
    """A rate table failed validation when it was finalized."""
