"""
Serializer for Sharecart1000 ``o_o.ini`` text.

Writes the canonical layout every Sharecart program expects: the [Main]
header followed by all fifteen keys in a fixed order, ``Key=Value`` with no
padding, and ``\\n`` line endings.
"""

from __future__ import annotations

from typing import Any, List, Sequence, TypeVar

from .models import (
    MAIN_SECTION,
    MAP_X_KEY,
    MAP_Y_KEY,
    MISC_KEYS,
    PLAYER_NAME_KEY,
    SWITCH_KEYS,
    Sharecart,
    clamp_misc,
    clean_player_name,
    wrap_map_coord,
)

T = TypeVar("T")


def _slot(values: Sequence[T], index: int, default: T) -> T:
    # List fields can be mutated in place without validation.
    return values[index] if index < len(values) else default


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _format_flag(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def serialize(cart: Sharecart) -> str:
    """
    Render a Sharecart as the full text of an ``o_o.ini`` file.

    The result replaces the whole file. Values are normalised the same way
    the model does on assignment, so this never fails: list entries mutated
    in place to non-numeric values are written as their defaults.

    Example:
        >>> serialize(Sharecart()).splitlines()[:3]
        ['[Main]', 'MapX=0', 'MapY=0']
    """
    lines: List[str] = [f"[{MAIN_SECTION}]"]
    lines.append(f"{MAP_X_KEY}={wrap_map_coord(_as_int(cart.map_x))}")
    lines.append(f"{MAP_Y_KEY}={wrap_map_coord(_as_int(cart.map_y))}")
    for i, key in enumerate(MISC_KEYS):
        lines.append(f"{key}={clamp_misc(_as_int(_slot(cart.misc, i, 0)))}")
    lines.append(f"{PLAYER_NAME_KEY}={clean_player_name(cart.player_name)}")
    for i, key in enumerate(SWITCH_KEYS):
        lines.append(f"{key}={_format_flag(bool(_slot(cart.switch, i, False)))}")
    return "\n".join(lines) + "\n"
