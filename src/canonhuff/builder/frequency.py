from collections import Counter
from collections.abc import Iterator
from typing import Self

from toolz import pipe

from ..errors import EmptyInputError


class FrequencyTable:
    """Occurrence count of every distinct symbol of a text.

    Entries are (count, symbol) pairs ordered by ascending count, then by
    ascending symbol, so that equal counts always come out in the same order.
    Several symbols may share a count.
    """

    def __init__(self, entries: list[tuple[int, str]]) -> None:
        self._entries = sorted(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"FrequencyTable({self._entries!r})"

    @classmethod
    def from_text(cls, text: str) -> Self:
        if not text:
            raise EmptyInputError("Cannot count the symbols of an empty text")
        entries: list[tuple[int, str]] = pipe(
            Counter(text).items(),
            lambda arg: map(lambda x: (x[1], x[0]), arg),
            list,
        )
        return cls(entries)

    @property
    def entries(self) -> list[tuple[int, str]]:
        return list(self._entries)

    @property
    def counts(self) -> dict[str, int]:
        return {symbol: count for count, symbol in self._entries}

    @property
    def symbols(self) -> list[str]:
        return sorted(symbol for _, symbol in self._entries)

    @property
    def total(self) -> int:
        return sum(count for count, _ in self._entries)
