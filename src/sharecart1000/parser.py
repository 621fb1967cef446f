"""
Parser for Sharecart1000 ``o_o.ini`` text.

The file is a tiny INI document: a ``[Main]`` section holding ``Key=Value``
lines. Keys are matched case-insensitively, unknown keys are ignored and
missing keys keep their defaults, so files written by newer or sloppier
programs still load.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Optional, Tuple

from .config import ParseOptions
from .errors import ParseError, ParseErrorKind
from .models import (
    MAIN_SECTION,
    MAP_X_KEY,
    MAP_Y_KEY,
    MISC_COUNT,
    MISC_KEYS,
    MISC_MAX,
    PLAYER_NAME_KEY,
    SWITCH_COUNT,
    SWITCH_KEYS,
    Sharecart,
    clean_player_name,
    wrap_map_coord,
)

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)
_COMMENT_PREFIXES = (";", "#")

# Field values collected while scanning; the record is built once at the end.
_State = Dict[str, Any]
_Assign = Callable[[_State, Any], None]


def _to_u16(value: str) -> int:
    if not _UNSIGNED.fullmatch(value):
        raise ValueError(f"expected an unsigned integer, got {value!r}")
    number = int(value)
    if number > MISC_MAX:
        raise ValueError(f"{number} does not fit in 16 bits")
    return number


def _to_map_coord(value: str) -> int:
    return wrap_map_coord(_to_u16(value))


def _to_flag(value: str) -> bool:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"expected TRUE or FALSE, got {value!r}")


def _set(field: str) -> _Assign:
    def assign(state: _State, value: Any) -> None:
        state[field] = value

    return assign


def _set_slot(field: str, index: int) -> _Assign:
    def assign(state: _State, value: Any) -> None:
        state[field][index] = value

    return assign


def _build_handlers() -> Dict[str, Tuple[Callable[[str], Any], _Assign, Any]]:
    """Map lowercased file key -> (converter, assignment, default)."""
    handlers = {
        MAP_X_KEY.lower(): (_to_map_coord, _set("map_x"), 0),
        MAP_Y_KEY.lower(): (_to_map_coord, _set("map_y"), 0),
        PLAYER_NAME_KEY.lower(): (clean_player_name, _set("player_name"), ""),
    }
    for i, key in enumerate(MISC_KEYS):
        handlers[key.lower()] = (_to_u16, _set_slot("misc", i), 0)
    for i, key in enumerate(SWITCH_KEYS):
        handlers[key.lower()] = (_to_flag, _set_slot("switch", i), False)
    return handlers


_HANDLERS = _build_handlers()


def _initial_state() -> _State:
    return {
        "map_x": 0,
        "map_y": 0,
        "misc": [0] * MISC_COUNT,
        "player_name": "",
        "switch": [False] * SWITCH_COUNT,
    }


def _split_lines(text: str):
    text = text.lstrip("\ufeff")
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def parse(text: str, options: Optional[ParseOptions] = None) -> Sharecart:
    """
    Parse the contents of an ``o_o.ini`` file.

    Args:
        text: Full text of the file.
        options: Parser switches; strict parsing with an implicit [Main]
            section by default.

    Returns:
        A fully populated Sharecart. Keys that are absent keep their defaults.

    Raises:
        ParseError: In strict mode, if a line is neither blank, a comment, a
            section header nor a ``key=value`` pair, or if a known [Main] key
            holds a value of the wrong type.

    Example:
        >>> parse("[Main]\\nMapX=73\\nSwitch2=true\\n").map_x
        73
    """
    options = options or ParseOptions.default()
    state = _initial_state()
    in_main = options.implicit_main

    for line_no, raw_line in enumerate(_split_lines(text), 1):
        stripped = raw_line.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue

        if stripped.startswith("["):
            if not stripped.endswith("]"):
                _malformed(options, line_no, raw_line, "unterminated section header")
                continue
            section = stripped[1:-1].strip()
            in_main = section.lower() == MAIN_SECTION.lower()
            if not in_main:
                logger.debug("Ignoring section [%s] on line %d", section, line_no)
            continue

        key, sep, value = stripped.partition("=")
        key = key.strip()
        if not sep or not key:
            _malformed(options, line_no, raw_line, "expected 'key = value'")
            continue

        if not in_main:
            continue

        handler = _HANDLERS.get(key.lower())
        if handler is None:
            logger.debug("Ignoring unknown key %r on line %d", key, line_no)
            continue

        convert, assign, default = handler
        value = value.strip()
        try:
            converted = convert(value)
        except ValueError as e:
            if options.strict:
                raise ParseError(
                    ParseErrorKind.INVALID_VALUE, line_no, str(e), key=key, line=raw_line
                ) from e
            logger.warning("Line %d: %s for %s, using %r", line_no, e, key, default)
            converted = default
        assign(state, converted)

    return Sharecart(**state)


def _malformed(options: ParseOptions, line_no: int, raw_line: str, reason: str) -> None:
    if options.strict:
        raise ParseError(ParseErrorKind.MALFORMED_LINE, line_no, reason, line=raw_line)
    logger.warning("Skipping malformed line %d (%s): %r", line_no, reason, raw_line)
