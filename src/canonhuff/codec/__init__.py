from .codec import Codec, EncodeStrategy, replace_substring
from .table import CodeTable

__all__ = ["Codec", "CodeTable", "EncodeStrategy", "replace_substring"]
