"""
The indel error rate table. Rates are keyed by repeat unit length and repeat count, with one
insertion and one deletion rate per key. The table is built up with add_rate, then finalized into
one dense, read-only array per repeat unit length, after which it can only be queried.
"""

import logging

from enum import IntEnum
from typing import Iterator

import numpy as np

from ..common import InvalidRateTableError
from ..variants import IndelKey

__all__ = [
    "IndelErrorRateType",
    "IndelErrorRateSet"
]

_LOG = logging.getLogger(__name__)


class IndelErrorRateType(IntEnum):
    """
    The allele transition an error rate applies to. The values of INSERT and DELETE double as
    column indices into the finalized rate arrays.
    """
    INSERT = 0
    DELETE = 1
    COMPLEX = 2

    @classmethod
    def from_indel_key(cls, indel_key: IndelKey) -> "IndelErrorRateType":
        if indel_key.is_insertion:
            return cls.INSERT
        if indel_key.is_deletion:
            return cls.DELETE
        return cls.COMPLEX

    def opposite(self) -> "IndelErrorRateType":
        assert self != IndelErrorRateType.COMPLEX, "complex indels have no reverse direction"
        return IndelErrorRateType.INSERT if self == IndelErrorRateType.DELETE else IndelErrorRateType.DELETE


class IndelErrorRateSet:
    """
    Sparse table of indel error rates, finalized into dense per-unit-length arrays.

    After finalize_rates, every repeat unit length in the table covers each repeat count from 1 up
    to its largest count. Lookups past the largest count return the last calibrated rate, and
    lookups for a repeat unit length missing from the table return the non-repeat baseline
    at (1, 1).
    """

    def __init__(self):
        self._rates: dict[int, dict[int, tuple[float, float]]] = {}
        self._finalized: dict[int, np.ndarray] | None = None

    def add_rate(self, repeat_unit_length: int, repeat_count: int, insert_rate: float, delete_rate: float):
        """
        Add the error rates for one repeat context.

        :param repeat_unit_length: Length of the repeating motif, 1 or more
        :param repeat_count: Copies of the motif, 1 or more
        :param insert_rate: Probability of an insertion error in this context
        :param delete_rate: Probability of a deletion error in this context
        """
        assert self._finalized is None, "cannot add rates to a finalized table"
        assert repeat_unit_length > 0 and repeat_count > 0
        unit_rates = self._rates.setdefault(repeat_unit_length, {})
        assert repeat_count not in unit_rates, \
            f"duplicate rate for repeat unit length {repeat_unit_length}, repeat count {repeat_count}"
        unit_rates[repeat_count] = (float(insert_rate), float(delete_rate))

    @property
    def is_finalized(self) -> bool:
        return self._finalized is not None

    def finalize_rates(self):
        """
        Validate the table and convert it to its dense, read-only form. Calling this more than once has
        no further effect.

        Raises InvalidRateTableError if the table is empty, lacks the (1, 1) baseline, has a gap in
        the repeat counts of any repeat unit length, or holds a rate outside [0, 1].
        """
        if self._finalized is not None:
            return

        if not self._rates:
            _LOG.error("Indel error rate table is empty")
            raise InvalidRateTableError("Indel error rate table is empty")

        if 1 not in self._rates.get(1, {}):
            _LOG.error("Indel error rate table has no rate for repeat unit length 1, repeat count 1")
            raise InvalidRateTableError(
                "Indel error rate table has no rate for repeat unit length 1, repeat count 1"
            )

        finalized = {}
        for repeat_unit_length in sorted(self._rates):
            unit_rates = self._rates[repeat_unit_length]
            max_repeat_count = max(unit_rates)
            missing = [count for count in range(1, max_repeat_count + 1) if count not in unit_rates]
            if missing:
                mssg = f"Indel error rate table for repeat unit length {repeat_unit_length} " \
                       f"is missing repeat counts {missing}"
                _LOG.error(mssg)
                raise InvalidRateTableError(mssg)

            rates = np.array([unit_rates[count] for count in range(1, max_repeat_count + 1)], dtype=float)
            if not np.all(np.isfinite(rates)) or np.any(rates < 0.) or np.any(rates > 1.):
                mssg = f"Indel error rates for repeat unit length {repeat_unit_length} must be between 0 and 1"
                _LOG.error(mssg)
                raise InvalidRateTableError(mssg)

            # Repeat count 1 is the non-repeat baseline, so it is left out of the monotonic check
            if np.any(np.diff(rates[1:], axis=0) < 0):
                _LOG.warning(f"Indel error rates for repeat unit length {repeat_unit_length} "
                             f"decrease with repeat count")

            rates.setflags(write=False)
            finalized[repeat_unit_length] = rates
            _LOG.debug(f"Finalized {max_repeat_count} indel error rates for repeat unit length {repeat_unit_length}")

        self._finalized = finalized

    def get_rate(self, repeat_unit_length: int, repeat_count: int, rate_type: IndelErrorRateType) -> float:
        """
        Look up an error rate in the finalized table.

        :param repeat_unit_length: Length of the repeating motif, 1 or more
        :param repeat_count: Copies of the motif, 1 or more
        :param rate_type: INSERT or DELETE
        :return: The error probability
        """
        assert self._finalized is not None, "rate table must be finalized before it is queried"
        assert repeat_unit_length > 0 and repeat_count > 0
        assert rate_type in (IndelErrorRateType.INSERT, IndelErrorRateType.DELETE)

        rates = self._finalized.get(repeat_unit_length)
        if rates is None:
            return float(self._finalized[1][0, rate_type])
        index = min(repeat_count, len(rates)) - 1
        return float(rates[index, rate_type])

    @property
    def repeat_unit_lengths(self) -> list[int]:
        if self._finalized is not None:
            return list(self._finalized)
        return sorted(self._rates)

    def max_repeat_count(self, repeat_unit_length: int) -> int:
        if self._finalized is not None:
            return len(self._finalized[repeat_unit_length])
        return max(self._rates[repeat_unit_length])

    def iter_rates(self) -> Iterator[tuple[int, int, float, float]]:
        """
        Yields (repeat unit length, repeat count, insertion rate, deletion rate), ordered by repeat
        unit length, then repeat count.
        """
        assert self._finalized is not None, "rate table must be finalized before it is read"
        for repeat_unit_length, rates in self._finalized.items():
            for index, (insert_rate, delete_rate) in enumerate(rates):
                yield repeat_unit_length, index + 1, float(insert_rate), float(delete_rate)

    def __len__(self):
        return sum(len(unit_rates) for unit_rates in self._rates.values())

    def __repr__(self):
        return f'{self.__class__.__name__}(units={self.repeat_unit_lengths}, entries={len(self)})'
