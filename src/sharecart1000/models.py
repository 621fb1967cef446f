from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:  # pragma: no cover
    from .config import ParseOptions

# Name every Sharecart program reads and writes, next to its executable.
FILE_NAME = "o_o.ini"
MAIN_SECTION = "Main"

MAP_COORD_LIMIT = 1024  # 10 bits
MISC_MAX = 0xFFFF  # 16 bits
PLAYER_NAME_MAX_BYTES = 1023
MISC_COUNT = 4
SWITCH_COUNT = 8

MAP_X_KEY = "MapX"
MAP_Y_KEY = "MapY"
MISC_KEYS = tuple(f"Misc{i}" for i in range(MISC_COUNT))
PLAYER_NAME_KEY = "PlayerName"
SWITCH_KEYS = tuple(f"Switch{i}" for i in range(SWITCH_COUNT))

_NAME_DROPPED = {"\r", "\n", "\ufffd"}


def wrap_map_coord(value: int) -> int:
    """Reduce a map coordinate to the 10 bits the format stores.

    Negative values saturate to 0; anything larger keeps only its low bits.
    """
    if value < 0:
        return 0
    return value % MAP_COORD_LIMIT


def clamp_misc(value: int) -> int:
    return max(0, min(MISC_MAX, value))


def clean_player_name(value: str) -> str:
    """Make a name representable on a single ``PlayerName=`` line.

    Line breaks, U+FFFD and characters with no UTF-8 form (lone surrogates,
    e.g. from a surrogateescape decode) are removed, the UTF-8 form is cut to
    PLAYER_NAME_MAX_BYTES (a character split by the cut is dropped) and
    surrounding whitespace is stripped, since readers strip it anyway.
    """
    text = "".join(ch for ch in value if ch not in _NAME_DROPPED)
    raw = text.encode("utf-8", errors="ignore")[:PLAYER_NAME_MAX_BYTES]
    return raw.decode("utf-8", errors="ignore").strip()


class Sharecart(BaseModel):
    """One ``o_o.ini`` worth of shared game state.

    Fields are validated on construction and on assignment. Values outside
    what the file can hold are normalised rather than rejected:

    - map_x / map_y: 0-1023, see wrap_map_coord
    - misc: four values saturated into 0-65535
    - player_name: see clean_player_name
    - switch: eight flags
    """

    model_config = ConfigDict(validate_assignment=True)

    map_x: int = Field(0, description="Horizontal map position, 10 bits")
    map_y: int = Field(0, description="Vertical map position, 10 bits")
    misc: List[int] = Field(
        default_factory=lambda: [0] * MISC_COUNT,
        min_length=MISC_COUNT,
        max_length=MISC_COUNT,
        description="Free-form 16 bit values",
    )
    player_name: str = Field("", description="Player name, at most 1023 UTF-8 bytes")
    switch: List[bool] = Field(
        default_factory=lambda: [False] * SWITCH_COUNT,
        min_length=SWITCH_COUNT,
        max_length=SWITCH_COUNT,
        description="The eight shared switches",
    )

    @field_validator("map_x", "map_y")
    @classmethod
    def _wrap_map_coord(cls, v: int) -> int:
        return wrap_map_coord(v)

    @field_validator("misc")
    @classmethod
    def _clamp_misc(cls, v: List[int]) -> List[int]:
        return [clamp_misc(x) for x in v]

    # Runs before str validation, which rejects lone surrogates.
    @field_validator("player_name", mode="before")
    @classmethod
    def _clean_player_name(cls, v: Any) -> Any:
        return clean_player_name(v) if isinstance(v, str) else v

    @classmethod
    def from_text(cls, text: str, options: Optional["ParseOptions"] = None) -> "Sharecart":
        from .parser import parse

        return parse(text, options)

    def to_text(self) -> str:
        from .serializer import serialize

        return serialize(self)
