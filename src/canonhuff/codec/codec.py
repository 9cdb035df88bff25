import sys
from collections.abc import Mapping
from enum import Enum

from loguru import logger

from .table import CodeTable
from ..builder.canonical import assign_canonical_codes
from ..builder.frequency import FrequencyTable
from ..builder.lengths import derive_code_lengths
from ..builder.tree import HuffmanTree
from ..errors import EmptyInputError, InvalidSubstitutionError, MalformedCodeError, UnknownSymbolError
from ..utils.bitstring import BitString


class EncodeStrategy(str, Enum):
    # Append the code of each symbol in text order.
    LOOKUP = "lookup"
    # Replace every occurrence of each symbol in the whole text, symbol by symbol.
    SUBSTITUTE = "substitute"


def replace_substring(text: str, pattern: str, replacement: str) -> str:
    if not pattern or not text or not replacement:
        raise InvalidSubstitutionError(
            f"Substitution needs a non-empty text, pattern and replacement "
            f"(text: {len(text)} chars, pattern: {pattern!r}, replacement: {replacement!r})"
        )
    return text.replace(pattern, replacement)


class Codec:
    def __init__(self, is_logging: bool = False, strategy: EncodeStrategy = EncodeStrategy.LOOKUP) -> None:
        self._is_logging = is_logging
        self.strategy = EncodeStrategy(strategy)

        logger.remove()
        logger.add(sys.stdout, filter=lambda _: self._is_logging)

        # If a message higher than ERROR is logged while _is_logging is False, log it to stderr regardless of the logging flag
        logger.add(sys.stderr, level="ERROR", filter=lambda _: not self._is_logging)

    # text -> frequency table -> Huffman tree -> code lengths -> canonical codes
    def build_code_table(self, text: str) -> CodeTable:
        if not text:
            logger.error("Cannot build a code table from an empty text")
            raise EmptyInputError("Cannot build a code table from an empty text")

        frequency_table = FrequencyTable.from_text(text)
        logger.info(f"Alphabet size: {len(frequency_table)}, text length: {frequency_table.total}")

        tree = HuffmanTree.from_frequency_table(frequency_table)
        lengths = derive_code_lengths(tree)
        table = CodeTable(assign_canonical_codes(lengths))

        logger.info(f"Code table built, longest code: {lengths[-1][0]} bits")
        return table

    def encode(self, text: str, code_table: Mapping[str, str]) -> str:
        if not text:
            logger.error("Cannot encode an empty text")
            raise EmptyInputError("Cannot encode an empty text")
        for symbol, code in code_table.items():
            if not code:
                logger.error(f"Empty code for symbol {symbol!r}")
                raise InvalidSubstitutionError(f"Empty code for symbol {symbol!r}")
        table = self._as_code_table(code_table)

        missing = sorted(set(text) - set(table))
        if missing:
            logger.error(f"Symbols without a code: {missing}")
            raise UnknownSymbolError(f"Symbols without a code: {missing}")

        match self.strategy:
            case EncodeStrategy.LOOKUP:
                encoded_text = "".join(table[symbol] for symbol in text)
            case EncodeStrategy.SUBSTITUTE:
                encoded_text = self._encode_by_substitution(text, table)
            case _:
                assert False

        logger.info(f"Encoded {len(text)} symbols into {len(encoded_text)} bits")
        return encoded_text

    def decode(self, bit_string: str, code_table: Mapping[str, str]) -> str:
        table = self._as_code_table(code_table)
        if not bit_string:
            logger.error("Cannot decode an empty bit string")
            raise EmptyInputError("Cannot decode an empty bit string")

        codes = table.inverse()
        max_code_length = max(len(code) for code in codes)
        stream = BitString(bit_string)

        decoded_text: list[str] = []
        code = ""
        while not stream.at_end():
            code += stream.read_bit()
            symbol = codes.get(code)
            if symbol is not None:
                decoded_text.append(symbol)
                code = ""
            elif len(code) >= max_code_length:
                logger.error(f"Invalid Huffman code {code!r} at offset {stream.offset - len(code)}")
                raise MalformedCodeError(f"Invalid Huffman code {code!r} at offset {stream.offset - len(code)}")

        if code:
            logger.error(f"Bit string ends with unmatched bits {code!r}")
            raise MalformedCodeError(f"Bit string ends with unmatched bits {code!r}")

        logger.info(f"Decoded {len(bit_string)} bits into {len(decoded_text)} symbols")
        return "".join(decoded_text)

    # Each replacement only writes '0'/'1', so a symbol that is itself a bit
    # would rewrite codes placed by earlier replacements.
    def _encode_by_substitution(self, text: str, table: CodeTable) -> str:
        clashing = sorted(set(table) & {"0", "1"})
        if clashing:
            logger.error(f"Substitution cannot encode the symbols {clashing}")
            raise InvalidSubstitutionError(f"Substitution cannot encode the symbols {clashing}")

        encoded_text = text
        for symbol, code in table.items():
            if symbol in encoded_text:
                encoded_text = replace_substring(encoded_text, symbol, code)
        return encoded_text

    def _as_code_table(self, code_table: Mapping[str, str]) -> CodeTable:
        if isinstance(code_table, CodeTable):
            return code_table
        try:
            return CodeTable(code_table)
        except (EmptyInputError, MalformedCodeError) as e:
            logger.error(f"Invalid code table: {e}")
            raise
