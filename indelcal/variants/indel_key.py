"""
Classes describing a candidate indel allele and the repeat context it was found in.
"""

from dataclasses import dataclass

from Bio.Seq import Seq

__all__ = [
    "IndelKey",
    "RepeatContext"
]


@dataclass(frozen=True)
class IndelKey:
    """
    An indel allele, described the way the caller sees it: the reference bases it removes and
    the bases it puts in their place.

    :param position: 0-based reference position of the first affected base (after any padding base)
    :param delete_length: Number of reference bases removed
    :param insert_sequence: Bases inserted in place of the removed bases
    """
    position: int
    delete_length: int = 0
    insert_sequence: str = ""

    def __post_init__(self):
        if self.delete_length < 0:
            raise ValueError(f"delete_length must be non-negative (found: {self.delete_length})")
        # Allow Seq and lower case input but store a plain upper case string so keys hash alike
        object.__setattr__(self, "insert_sequence", str(self.insert_sequence).upper())

    @classmethod
    def from_vcf_alleles(cls, position: int, ref: str | Seq, alt: str | Seq) -> "IndelKey":
        """
        Build a key from VCF style alleles, where ref and alt share one or more leading padding bases.

        :param position: The 0-based position of the first base of ref
        :param ref: The reference allele
        :param alt: The alternate allele
        :return: The key with the shared leading bases removed
        """
        ref = str(ref).upper()
        alt = str(alt).upper()
        shared = 0
        while shared < min(len(ref), len(alt)) and ref[shared] == alt[shared]:
            shared += 1
        return cls(position + shared, len(ref) - shared, alt[shared:])

    @property
    def insert_length(self) -> int:
        return len(self.insert_sequence)

    @property
    def is_insertion(self) -> bool:
        return self.delete_length == 0 and self.insert_length > 0

    @property
    def is_deletion(self) -> bool:
        return self.delete_length > 0 and self.insert_length == 0

    @property
    def is_simple(self) -> bool:
        """Pure insertions and pure deletions are simple. Everything else is complex."""
        return self.is_insertion or self.is_deletion

    def __repr__(self):
        return f'{self.__class__.__name__}({self.position}, -{self.delete_length}, +{self.insert_sequence!r})'


@dataclass(frozen=True)
class RepeatContext:
    """
    Repeat features of the locus an indel was found at. These come from upstream of the error model
    and may be 0 where no repeat was found; the error model clamps them to 1.

    :param repeat_unit_length: Number of bases in the repeating motif (1 for a homopolymer)
    :param ref_repeat_count: Copies of the motif in the reference allele
    :param indel_repeat_count: Copies of the motif in the indel allele
    """
    repeat_unit_length: int = 1
    ref_repeat_count: int = 1
    indel_repeat_count: int = 1
