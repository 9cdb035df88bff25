from collections.abc import Mapping

import numpy as np
from numpy.typing import NDArray

from .builder.frequency import FrequencyTable
from .errors import UnknownSymbolError

# Width of one character in the uncompressed text
FIXED_CODE_LENGTH = 8


class CodeStatistics:
    """Compares a code table against the symbol distribution it encodes.

    The Shannon entropy of the distribution is a lower bound on the average
    code length of any prefix-free code; a Huffman code is within one bit of it.
    """

    def __init__(self, frequency_table: FrequencyTable, code_table: Mapping[str, str]) -> None:
        symbols = [symbol for _, symbol in frequency_table]
        missing = sorted(set(symbols) - set(code_table))
        if missing:
            raise UnknownSymbolError(f"Symbols without a code: {missing}")
        self._counts: NDArray[np.int64] = np.array([count for count, _ in frequency_table], dtype=np.int64)
        self._lengths: NDArray[np.int64] = np.array([len(code_table[symbol]) for symbol in symbols], dtype=np.int64)

    @property
    def probabilities(self) -> NDArray[np.float64]:
        return self._counts / self._counts.sum()

    def entropy(self) -> float:
        p = self.probabilities
        return float(-(p * np.log2(p)).sum())

    def average_code_length(self) -> float:
        return float((self.probabilities * self._lengths).sum())

    def encoded_length(self) -> int:
        return int((self._counts * self._lengths).sum())

    # A single symbol has zero entropy but still needs one bit per occurrence.
    def efficiency(self) -> float:
        return self.entropy() / self.average_code_length()

    def compression_ratio(self) -> float:
        return float(self._counts.sum() * FIXED_CODE_LENGTH) / self.encoded_length()
