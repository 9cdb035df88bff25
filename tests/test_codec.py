import heapq
import random
import string

import pytest

import canonhuff
from canonhuff.builder.frequency import FrequencyTable
from canonhuff.codec.codec import Codec, EncodeStrategy, replace_substring
from canonhuff.errors import (
    EmptyInputError,
    InvalidSubstitutionError,
    MalformedCodeError,
    UnknownSymbolError,
)


def optimal_length(text: str) -> int:
    # Cost of a Huffman code is the sum of the weights of every merged node.
    weights = [count for count, _ in FrequencyTable.from_text(text)]
    heapq.heapify(weights)
    cost = 0
    while len(weights) > 1:
        merged = heapq.heappop(weights) + heapq.heappop(weights)
        cost += merged
        heapq.heappush(weights, merged)
    return cost


class TestBuildCodeTable:
    def test_abracadabra(self) -> None:
        table = Codec().build_code_table("abracadabra")
        assert table == {"a": "0", "r": "10", "b": "110", "c": "1110", "d": "1111"}

    def test_canonical(self) -> None:
        table = Codec().build_code_table("she sells sea shells by the sea shore")
        assert table.is_canonical()

    def test_prefix_free(self) -> None:
        text = "".join(random.choices(string.ascii_letters + string.digits, k=1000))
        codes = list(Codec().build_code_table(text).values())
        for a in codes:
            for b in codes:
                if a != b:
                    assert not b.startswith(a)

    def test_single_symbol(self) -> None:
        table = Codec().build_code_table("aaaa")
        assert len(table) == 1
        assert len(table["a"]) >= 1

    def test_deterministic(self) -> None:
        text = "".join(random.choices(string.ascii_letters, k=500))
        assert Codec().build_code_table(text) == Codec().build_code_table(text)

    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError):
            Codec().build_code_table("")


class TestEncode:
    def test_abracadabra(self) -> None:
        codec = Codec()
        table = codec.build_code_table("abracadabra")
        assert codec.encode("abracadabra", table) == "01101001110011110110100"

    def test_optimal_length(self) -> None:
        for text in ["abracadabra", "mississippi", "Hello, world!", "aaabbbcccaaabbbddd"]:
            table = Codec().build_code_table(text)
            assert len(Codec().encode(text, table)) == optimal_length(text)

    def test_optimal_length_random(self) -> None:
        text = "".join(random.choices(string.ascii_letters + string.digits, k=10000))
        table = Codec().build_code_table(text)
        assert len(Codec().encode(text, table)) == optimal_length(text)

    def test_only_bits(self) -> None:
        text = "The quick brown fox jumps over the lazy dog."
        encoded = Codec().encode(text, Codec().build_code_table(text))
        assert set(encoded) <= {"0", "1"}

    def test_plain_dict(self) -> None:
        assert Codec().encode("abba", {"a": "0", "b": "1"}) == "0110"

    def test_subset_of_table(self) -> None:
        table = Codec().build_code_table("abracadabra")
        assert Codec().encode("cab", table) == "11100110"

    def test_substitute(self) -> None:
        text = "abracadabra"
        table = Codec().build_code_table(text)
        codec = Codec(strategy=EncodeStrategy.SUBSTITUTE)
        assert codec.encode(text, table) == Codec().encode(text, table)

    def test_substitute_random(self) -> None:
        text = "".join(random.choices(string.ascii_letters + "23456789", k=2000))
        table = Codec().build_code_table(text)
        assert Codec(strategy="substitute").encode(text, table) == Codec().encode(text, table)

    def test_substitute_bit_symbols(self) -> None:
        text = "0110 is 6"
        table = Codec().build_code_table(text)
        with pytest.raises(InvalidSubstitutionError):
            Codec(strategy=EncodeStrategy.SUBSTITUTE).encode(text, table)
        # Lookup has no such restriction.
        assert Codec().decode(Codec().encode(text, table), table) == text

    def test_empty_text(self) -> None:
        with pytest.raises(EmptyInputError):
            Codec().encode("", {"a": "0", "b": "1"})

    def test_empty_code(self) -> None:
        with pytest.raises(InvalidSubstitutionError):
            Codec().encode("ab", {"a": "", "b": "1"})

    def test_unknown_symbol(self) -> None:
        table = Codec().build_code_table("abc")
        with pytest.raises(UnknownSymbolError):
            Codec().encode("abcd", table)

    def test_prefix_table(self) -> None:
        with pytest.raises(MalformedCodeError):
            Codec().encode("ab", {"a": "0", "b": "01"})


class TestDecode:
    def test_abracadabra(self) -> None:
        table = Codec().build_code_table("abracadabra")
        assert Codec().decode("01101001110011110110100", table) == "abracadabra"

    def test_single_symbol(self) -> None:
        codec = Codec()
        table = codec.build_code_table("aaaa")
        encoded = codec.encode("aaaa", table)
        assert len(encoded) == 4 * len(table["a"])
        assert codec.decode(encoded, table) == "aaaa"

    def test_leftover_bits(self) -> None:
        table = Codec().build_code_table("abracadabra")
        with pytest.raises(MalformedCodeError):
            Codec().decode("101", table)

    def test_truncated(self) -> None:
        text = "This is a test" * 100
        codec = Codec()
        table = codec.build_code_table(text)
        encoded = codec.encode(text, table)
        with pytest.raises(MalformedCodeError):
            codec.decode(encoded[:-1], table)

    def test_unknown_code(self) -> None:
        # "1" never completes a code of the single symbol table.
        with pytest.raises(MalformedCodeError):
            Codec().decode("0010", {"a": "0"})

    def test_incomplete_table(self) -> None:
        with pytest.raises(MalformedCodeError):
            Codec().decode("0111", {"a": "0", "b": "10"})

    def test_non_bit_character(self) -> None:
        with pytest.raises(MalformedCodeError):
            Codec().decode("01x0", {"a": "0", "b": "1"})

    def test_empty_bit_string(self) -> None:
        with pytest.raises(EmptyInputError):
            Codec().decode("", {"a": "0", "b": "1"})

    def test_empty_table(self) -> None:
        with pytest.raises(EmptyInputError):
            Codec().decode("0101", {})


class TestRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            "abracadabra",
            "aaaa",
            "ab",
            "Hello, world!",
            "1234567890",
            "0110 and 1001",
            "こんにちは世界",
            "line one\nline two\ttabbed",
            "a" * 10**4 + "b",
        ],
    )
    def test_round_trip(self, text: str) -> None:
        table = canonhuff.build_code_table(text)
        assert canonhuff.decode(canonhuff.encode(text, table), table) == text

    def test_random(self) -> None:
        text = "".join(random.choices(string.ascii_letters + string.digits, k=10000))
        table = canonhuff.build_code_table(text)
        assert canonhuff.decode(canonhuff.encode(text, table), table) == text

    def test_persisted_table(self) -> None:
        text = "persist the table next to the bits"
        encoded = canonhuff.encode(text, canonhuff.build_code_table(text))
        table = canonhuff.CodeTable.from_json(canonhuff.build_code_table(text).to_json())
        assert canonhuff.decode(encoded, table) == text


class TestReplaceSubstring:
    def test_replace_all(self) -> None:
        assert replace_substring("abab", "a", "01") == "01b01b"

    def test_absent(self) -> None:
        assert replace_substring("bbb", "a", "0") == "bbb"

    @pytest.mark.parametrize(
        "text, pattern, replacement",
        [("", "a", "0"), ("abc", "", "0"), ("abc", "a", "")],
    )
    def test_empty(self, text: str, pattern: str, replacement: str) -> None:
        with pytest.raises(InvalidSubstitutionError):
            replace_substring(text, pattern, replacement)
