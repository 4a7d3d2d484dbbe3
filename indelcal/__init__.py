"""
indelcal: indel sequencing error models for small variant calling
"""

__version__ = '1.0.0'

from .models import IndelErrorModel, IndelErrorRateSet, IndelErrorRateType
from .variants import IndelKey, RepeatContext
