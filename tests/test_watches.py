import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kzkit.printf import sprintf
from kzkit.watches import Watch, WatchType, format_watch_value


def test_u8():
    assert format_watch_value(WatchType.U8, bytes([200])) == "200"


def test_s8_negative():
    assert format_watch_value(WatchType.S8, bytes([0xFF])) == "-1"


def test_x8_uppercase_hex():
    assert format_watch_value(WatchType.X8, bytes([0xAB])) == "AB"


def test_x16_padded():
    assert format_watch_value(WatchType.X16, bytes([0x00, 0x0F])) == "F".rjust(2)


def test_x32_padded():
    assert format_watch_value(WatchType.X32, bytes([0, 0, 0x12, 0x34])) == "1234".rjust(8)


def test_u16_is_big_endian():
    raw = bytes([0x01, 0x00])
    assert format_watch_value(WatchType.U16, raw) == str(int.from_bytes(raw, "big"))


@given(st.integers(-(2**15), 2**15 - 1))
def test_s16_round_trip(value):
    raw = value.to_bytes(2, "big", signed=True)
    assert format_watch_value(WatchType.S16, raw) == str(value)


@given(st.integers(-(2**31), 2**31 - 1))
def test_s32_round_trip(value):
    raw = value.to_bytes(4, "big", signed=True)
    assert format_watch_value(WatchType.S32, raw) == str(value)


@given(st.integers(0, 2**32 - 1))
def test_u32_round_trip(value):
    raw = value.to_bytes(4, "big")
    assert format_watch_value(WatchType.U32, raw) == str(value)


def test_extra_bytes_ignored():
    assert format_watch_value(WatchType.U8, bytes([7, 9, 9])) == "7"


def test_accepts_integer_type():
    assert format_watch_value(int(WatchType.X8), bytes([0xAB])) == "AB"


def test_short_memory_rejected():
    with pytest.raises(ValueError):
        format_watch_value(WatchType.U32, bytes(2))


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        format_watch_value(42, bytes(4))


def test_float_zero_uses_fixed():
    assert format_watch_value(WatchType.FLOAT, bytes(4)) == "%f" % 0.0


def test_float_negative_zero_matches_zero():
    negative_zero = bytes([0x80, 0, 0, 0])
    assert format_watch_value(WatchType.FLOAT, negative_zero) == format_watch_value(
        WatchType.FLOAT, bytes(4)
    )


@pytest.mark.parametrize("value", [0.5, 1.0, -3.25, 1234.5])
def test_float_uses_general_format(value):
    raw = struct.pack(">f", value)
    assert format_watch_value(WatchType.FLOAT, raw) == sprintf("%g", value)


def test_render_fixed_watch():
    watch = Watch(address=0x801EF670, watch_type=WatchType.U8, x=10, y=20)
    assert watch.render(bytes([7])) == [(10, 20, "7")]


def test_render_floating_with_label():
    watch = Watch(
        address=0x801EF670, watch_type=WatchType.U8, x=10, y=20, floating=True, label="rupees"
    )
    items = watch.render(bytes([7]))
    assert items[0] == (10, 20, "7")
    assert items[1] == (26, 20, "rupees")


def test_label_only_drawn_when_floating():
    watch = Watch(address=0, watch_type=WatchType.U8, label="rupees")
    assert len(watch.render(bytes([1]))) == 1


def test_floating_without_label():
    watch = Watch(address=0, watch_type=WatchType.U8, floating=True)
    assert watch.render(bytes([3])) == [(0, 0, "3")]


def test_value_text_uses_watch_type():
    watch = Watch(address=0, watch_type=WatchType.S8)
    assert watch.value_text(bytes([0xFF])) == format_watch_value(WatchType.S8, bytes([0xFF]))