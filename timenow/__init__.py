"""timenow - print the current time in a chosen format and copy it."""

__version__ = "0.1.0"

from .offset import OffsetError, OffsetRangeError, parse_offset, format_offset
from .formats import FormatResult, UnknownFormatError, format_now, available_formats
from .config import ConfigManager

__all__ = [
    "OffsetError",
    "OffsetRangeError",
    "parse_offset",
    "format_offset",
    "FormatResult",
    "UnknownFormatError",
    "format_now",
    "available_formats",
    "ConfigManager",
]
