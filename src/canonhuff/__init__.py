from collections.abc import Mapping

from .builder import FrequencyTable, HuffmanTree
from .codec import Codec, CodeTable, EncodeStrategy
from .errors import (
    EmptyInputError,
    HuffmanError,
    InvalidSubstitutionError,
    MalformedCodeError,
    UnknownSymbolError,
)
from .stats import CodeStatistics


def build_code_table(text: str, is_logging: bool = False) -> CodeTable:
    return Codec(is_logging=is_logging).build_code_table(text)


def encode(
    text: str,
    code_table: Mapping[str, str],
    is_logging: bool = False,
    strategy: EncodeStrategy = EncodeStrategy.LOOKUP,
) -> str:
    return Codec(is_logging=is_logging, strategy=strategy).encode(text, code_table)


def decode(bit_string: str, code_table: Mapping[str, str], is_logging: bool = False) -> str:
    return Codec(is_logging=is_logging).decode(bit_string, code_table)


__all__ = [
    "CodeStatistics",
    "CodeTable",
    "Codec",
    "EmptyInputError",
    "EncodeStrategy",
    "FrequencyTable",
    "HuffmanError",
    "HuffmanTree",
    "InvalidSubstitutionError",
    "MalformedCodeError",
    "UnknownSymbolError",
    "build_code_table",
    "decode",
    "encode",
]
