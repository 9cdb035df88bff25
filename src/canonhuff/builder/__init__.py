from .canonical import assign_canonical_codes, increment_code
from .frequency import FrequencyTable
from .lengths import MIN_CODE_LENGTH, derive_code_lengths
from .tree import HuffmanTree, Node

__all__ = [
    "FrequencyTable",
    "HuffmanTree",
    "MIN_CODE_LENGTH",
    "Node",
    "assign_canonical_codes",
    "derive_code_lengths",
    "increment_code",
]
