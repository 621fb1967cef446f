"""Read and write Sharecart1000 ``o_o.ini`` files.

Sharecart1000 is a convention where unrelated games share one tiny save file
sitting next to their executables. This package provides:
- A validated Sharecart record with the format's fifteen fields
- parse(): file text to record, strict or lenient
- serialize(): record to the exact text other Sharecart programs expect

File access is left to the caller: pass text in, take text out.
"""

from .config import ParseOptions, load_options
from .errors import ConfigError, ParseError, ParseErrorKind, SharecartError
from .logging_config import configure_logging
from .models import (
    FILE_NAME,
    MAIN_SECTION,
    MAP_COORD_LIMIT,
    MISC_COUNT,
    MISC_MAX,
    PLAYER_NAME_MAX_BYTES,
    SWITCH_COUNT,
    Sharecart,
)
from .parser import parse
from .serializer import serialize

__all__ = [
    "FILE_NAME",
    "MAIN_SECTION",
    "MAP_COORD_LIMIT",
    "MISC_COUNT",
    "MISC_MAX",
    "PLAYER_NAME_MAX_BYTES",
    "SWITCH_COUNT",
    "Sharecart",
    "parse",
    "serialize",
    "ParseOptions",
    "load_options",
    "configure_logging",
    "SharecartError",
    "ParseError",
    "ParseErrorKind",
    "ConfigError",
]
