from __future__ import annotations

import pytest
from pydantic import ValidationError

from sharecart1000 import Sharecart
from sharecart1000.models import clamp_misc, clean_player_name, wrap_map_coord


def test_defaults():
    cart = Sharecart()
    assert cart.map_x == 0
    assert cart.map_y == 0
    assert cart.misc == [0, 0, 0, 0]
    assert cart.player_name == ""
    assert cart.switch == [False] * 8


def test_defaults_are_not_shared():
    a, b = Sharecart(), Sharecart()
    a.misc[0] = 5
    a.switch[0] = True
    assert b.misc[0] == 0
    assert b.switch[0] is False


def test_map_coordinates_wrap_on_assignment():
    cart = Sharecart(map_x=1500)
    assert cart.map_x == 1500 - 1024
    cart.map_y = 1023
    assert cart.map_y == 1023
    cart.map_y = 1024
    assert cart.map_y == 0
    cart.map_x = -5
    assert cart.map_x == 0


def test_misc_saturates():
    cart = Sharecart(misc=[70000, -1, 5, 65535])
    assert cart.misc == [65535, 0, 5, 65535]
    cart.misc = [1, 2, 3, 100000]
    assert cart.misc == [1, 2, 3, 65535]


def test_player_name_is_cleaned():
    cart = Sharecart(player_name="  Bob\r\n")
    assert cart.player_name == "Bob"
    cart.player_name = "A\ufffdB\nC"
    assert cart.player_name == "ABC"


def test_player_name_drops_lone_surrogates():
    cart = Sharecart(player_name="Ann\udcff")
    assert cart.player_name == "Ann"
    cart.player_name = "\ud800B\udfffob"
    assert cart.player_name == "Bob"


def test_player_name_truncates_on_byte_boundary():
    # 600 two-byte characters do not fit; the 1023rd byte splits one
    name = clean_player_name("é" * 600)
    assert len(name.encode("utf-8")) == 1022
    assert name == "é" * 511


@pytest.mark.parametrize("field, value", [("misc", [1, 2, 3]), ("switch", [True] * 9)])
def test_list_lengths_are_fixed(field: str, value: list):
    with pytest.raises(ValidationError):
        Sharecart(**{field: value})


def test_uncoercible_values_are_rejected():
    with pytest.raises(ValidationError):
        Sharecart(map_x="abc")
    cart = Sharecart()
    with pytest.raises(ValidationError):
        cart.misc = ["x", 0, 0, 0]
    assert cart.misc == [0, 0, 0, 0]


def test_copies_are_independent_and_compare_by_value():
    cart = Sharecart(map_x=3, switch=[True] * 8)
    copy = cart.model_copy(deep=True)
    assert copy == cart
    copy.switch[0] = False
    assert copy != cart


def test_helpers():
    assert wrap_map_coord(1023) == 1023
    assert wrap_map_coord(1025) == 1
    assert wrap_map_coord(-1) == 0
    assert clamp_misc(-10) == 0
    assert clamp_misc(65536) == 65535
    assert clean_player_name("x" * 1024) == "x" * 1023
