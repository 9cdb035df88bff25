from ..errors import MalformedCodeError

BITS = frozenset("01")


class BitString:
    def __init__(self, bit_string: str) -> None:
        self._bits = bit_string
        self._offset = 0

    def __len__(self) -> int:
        return len(self._bits)

    @property
    def offset(self) -> int:
        return self._offset

    # Returns the next bit as '0' or '1', read from left to right.
    def read_bit(self) -> str:
        bit = self._bits[self._offset]
        if bit not in BITS:
            raise MalformedCodeError(f"Invalid bit {bit!r} at offset {self._offset}")
        self._offset += 1
        return bit

    # e.g. read_bits(3) on "10110" -> "101"
    def read_bits(self, length: int) -> str:
        return "".join(self.read_bit() for _ in range(length))

    def at_end(self) -> bool:
        return self._offset >= len(self._bits)
