from .bitstring import BitString

__all__ = ["BitString"]
