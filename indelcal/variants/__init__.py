from .indel_key import IndelKey, RepeatContext
