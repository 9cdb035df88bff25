import json
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Self

from ..builder.canonical import assign_canonical_codes
from ..errors import EmptyInputError, MalformedCodeError

BITS = frozenset("01")


class CodeTable(Mapping[str, str]):
    """Read-only mapping of symbol to code, iterated by ascending symbol.

    The table is checked when it is created: every symbol is a single
    character, every code a non-empty string of '0'/'1', and no code is a
    prefix of another.
    """

    def __init__(self, codes: Mapping[str, str]) -> None:
        if not codes:
            raise EmptyInputError("Code table is empty")
        for symbol, code in codes.items():
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise MalformedCodeError(f"Symbol must be a single character, but got {symbol!r}")
            if not isinstance(code, str) or not code or not set(code) <= BITS:
                raise MalformedCodeError(f"Invalid code {code!r} for symbol {symbol!r}")
        self._check_prefix_free(codes)
        self._codes = MappingProxyType(dict(sorted(codes.items())))

    def __getitem__(self, symbol: str) -> str:
        return self._codes[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"CodeTable({dict(self._codes)!r})"

    def __hash__(self) -> int:
        return hash(tuple(self._codes.items()))

    # If some code is a prefix of another, it is also a prefix of the code
    # that follows it in lexicographic order.
    @staticmethod
    def _check_prefix_free(codes: Mapping[str, str]) -> None:
        ordered = sorted(codes.items(), key=lambda x: x[1])
        for (symbol, code), (next_symbol, next_code) in zip(ordered, ordered[1:]):
            if next_code.startswith(code):
                raise MalformedCodeError(
                    f"Code {code!r} of {symbol!r} is a prefix of code {next_code!r} of {next_symbol!r}"
                )

    def lengths(self) -> list[tuple[int, str]]:
        return sorted((len(code), symbol) for symbol, code in self._codes.items())

    def is_canonical(self) -> bool:
        return assign_canonical_codes(self.lengths()) == dict(self._codes)

    def inverse(self) -> dict[str, str]:
        return {code: symbol for symbol, code in self._codes.items()}

    def to_pairs(self) -> list[tuple[str, str]]:
        return list(self._codes.items())

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> Self:
        codes: dict[str, str] = {}
        for symbol, code in pairs:
            if not isinstance(symbol, str):
                raise MalformedCodeError(f"Symbol must be a single character, but got {symbol!r}")
            if symbol in codes:
                raise MalformedCodeError(f"Duplicate symbol {symbol!r}")
            codes[symbol] = code
        return cls(codes)

    def to_json(self) -> str:
        return json.dumps([[symbol, code] for symbol, code in self._codes.items()], ensure_ascii=False)

    @classmethod
    def from_json(cls, data: str) -> Self:
        try:
            pairs = json.loads(data)
        except json.JSONDecodeError as e:
            raise MalformedCodeError(f"Invalid code table JSON: {e}") from e
        if not isinstance(pairs, list) or not all(isinstance(p, list) and len(p) == 2 for p in pairs):
            raise MalformedCodeError("Code table JSON must be a list of [symbol, code] pairs")
        return cls.from_pairs((symbol, code) for symbol, code in pairs)
