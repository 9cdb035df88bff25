class HuffmanError(Exception):
    """Base class of every error raised by canonhuff."""


class EmptyInputError(HuffmanError):
    """Text, bit string or code table is empty where content is required."""


class InvalidSubstitutionError(HuffmanError):
    """A substring replacement was given an empty pattern, replacement or target."""


class MalformedCodeError(HuffmanError):
    """The bit string cannot be parsed, or a code table breaks the prefix-free rule."""


class UnknownSymbolError(MalformedCodeError):
    """The text holds a symbol that the code table has no code for."""
