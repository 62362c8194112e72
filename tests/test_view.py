"""Tests for the HexView widget and its input handling."""

import random
from typing import List

import pytest

from hexview import (
    CharEvent,
    Cursor,
    DisplayState,
    EventResult,
    HexView,
    HexViewConfig,
    Key,
    KeyEvent,
    MouseEvent,
)

RIGHT = KeyEvent(Key.RIGHT)
LEFT = KeyEvent(Key.LEFT)
UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)


def _editable(data: bytes = b"AB", config: HexViewConfig = HexViewConfig()) -> HexView:
    """Create an editable view over data."""
    return HexView(data, config, DisplayState.EDITABLE)


def _type(view: HexView, text: str) -> List[EventResult]:
    return [view.on_event(CharEvent(c)) for c in text]


class TestConstruction:
    """Tests for defaults and the buffer API."""

    def test_defaults(self) -> None:
        view = HexView()
        assert view.is_empty()
        assert len(view) == 0
        assert view.display_state is DisplayState.DISABLED
        assert view.config == HexViewConfig()
        assert view.cursor == Cursor(0, 0)
        assert view.take_focus() is False

    def test_accepts_any_iterable_of_ints(self) -> None:
        assert HexView([3, 6, 1, 8, 250]).data == bytes([3, 6, 1, 8, 250])
        assert HexView(b"Hello").data == b"Hello"

    def test_data_is_a_snapshot(self) -> None:
        source = bytearray(b"ABC")
        view = HexView(source)
        source[0] = 0
        assert view.data == b"ABC"
        assert isinstance(view.data, bytes)

    def test_rejects_out_of_range_bytes(self) -> None:
        with pytest.raises(ValueError):
            HexView([1, 256])
        with pytest.raises(ValueError):
            HexView().set_data([-1])

    @pytest.mark.parametrize("changes", [
        {"bytes_per_group": 0},
        {"bytes_per_group": 17},
        {"bytes_per_line": 0, "bytes_per_group": 0},
        {"start_addr": -1},
        {"addr_width": -2},
    ])
    def test_invalid_config_is_rejected(self, changes: dict) -> None:
        with pytest.raises(ValueError):
            HexViewConfig(**changes)

    def test_invalid_update_keeps_old_config(self) -> None:
        view = HexView(b"AB")
        with pytest.raises(ValueError):
            view.update_config(bytes_per_group=32)
        assert view.config == HexViewConfig()

    def test_chainable_setters(self) -> None:
        config = HexViewConfig(bytes_per_line=8)
        view = HexView(b"AB").with_config(config).with_display_state(DisplayState.ENABLED)
        assert view.config is config
        assert view.display_state is DisplayState.ENABLED
        assert view.take_focus() is True

    def test_repr_omits_data(self) -> None:
        text = repr(HexView(b"secret"))
        assert "secret" not in text
        assert "DISABLED" in text


class TestSetLen:
    """Tests for resizing the buffer."""

    def test_grow_appends_zeros(self) -> None:
        view = HexView(b"\x07\x08")
        view.set_len(5)
        assert view.data == b"\x07\x08\x00\x00\x00"

    def test_shrink_discards_and_clamps_cursor(self) -> None:
        view = HexView(b"\x01\x02\x03\x04\x05", state=DisplayState.ENABLED)
        view.on_event(KeyEvent(Key.END))
        assert view.cursor == Cursor(9, 0)
        view.set_len(2)
        assert view.data == b"\x01\x02"
        assert view.cursor == Cursor(3, 0)

    def test_shrink_across_rows(self) -> None:
        view = HexView(bytes(40), state=DisplayState.ENABLED)
        view.on_event(KeyEvent(Key.END, shift=True))
        assert view.cursor == Cursor(15, 2)
        view.set_len(5)
        assert view.cursor == Cursor(9, 0)

    def test_shrink_to_zero(self) -> None:
        view = HexView(b"AB", state=DisplayState.ENABLED)
        view.on_event(RIGHT)
        view.set_len(0)
        assert view.is_empty()
        assert view.cursor == Cursor(0, 0)

    def test_negative_length_saturates(self) -> None:
        view = HexView(b"AB")
        view.set_len(-3)
        assert view.is_empty()

    def test_set_data_clamps_cursor(self) -> None:
        view = HexView(bytes(20), state=DisplayState.ENABLED)
        view.on_event(DOWN)
        view.set_data(b"xyz")
        assert view.cursor == Cursor(0, 0)

    def test_config_change_clamps_cursor(self) -> None:
        view = HexView(bytes(20), state=DisplayState.ENABLED)
        view.on_event(KeyEvent(Key.END))
        assert view.cursor == Cursor(31, 0)
        view.update_config(bytes_per_line=4)
        assert view.cursor == Cursor(7, 0)


class TestNavigation:
    """Tests for navigation events and their verdicts."""

    def test_disabled_ignores_everything(self) -> None:
        view = HexView(b"ABCD")
        for event in (RIGHT, DOWN, KeyEvent(Key.HOME), CharEvent("+"), MouseEvent((5, 0))):
            assert view.on_event(event) is EventResult.IGNORED
        assert view.data == b"ABCD"
        assert view.cursor == Cursor(0, 0)

    def test_verdicts_are_passed_through(self) -> None:
        view = HexView(b"AB", state=DisplayState.ENABLED)
        assert view.on_event(LEFT) is EventResult.IGNORED
        assert view.on_event(UP) is EventResult.IGNORED
        assert view.on_event(DOWN) is EventResult.IGNORED
        assert view.on_event(RIGHT) is EventResult.CONSUMED
        assert view.on_event(RIGHT) is EventResult.CONSUMED
        assert view.on_event(RIGHT) is EventResult.CONSUMED
        assert view.on_event(RIGHT) is EventResult.IGNORED
        assert view.cursor == Cursor(3, 0)

    def test_home_end_and_jumps(self) -> None:
        view = HexView(bytes(20), state=DisplayState.ENABLED)
        assert view.on_event(KeyEvent(Key.END, shift=True)) is EventResult.CONSUMED
        assert view.cursor == Cursor(7, 1)
        assert view.on_event(KeyEvent(Key.HOME)) is EventResult.CONSUMED
        assert view.cursor == Cursor(0, 1)
        assert view.on_event(KeyEvent(Key.END)) is EventResult.CONSUMED
        assert view.cursor == Cursor(7, 1)
        assert view.on_event(KeyEvent(Key.HOME, shift=True)) is EventResult.CONSUMED
        assert view.cursor == Cursor(0, 0)

    def test_shifted_arrow_is_ignored(self) -> None:
        view = HexView(b"AB", state=DisplayState.ENABLED)
        assert view.on_event(KeyEvent(Key.RIGHT, shift=True)) is EventResult.IGNORED

    def test_characters_are_ignored_when_enabled(self) -> None:
        view = HexView(b"AB", state=DisplayState.ENABLED)
        assert _type(view, "+-a0") == [EventResult.IGNORED] * 4
        assert view.data == b"AB"

    def test_mouse_press_moves_cursor(self) -> None:
        view = HexView(bytes(20), state=DisplayState.ENABLED)
        # view drawn at (2, 5); hex field starts 4 columns in
        assert view.on_event(MouseEvent((2 + 4 + 10, 5 + 1), offset=(2, 5))) is EventResult.CONSUMED
        assert view.cursor == Cursor(7, 1)

    def test_mouse_press_outside_claimed_area_is_ignored(self) -> None:
        view = HexView(bytes(20), state=DisplayState.ENABLED)
        view.on_event(RIGHT)
        assert view.required_size() == (70, 2)
        # origin (2, 5): the view covers columns 2..71 and rows 5..6
        assert view.on_event(MouseEvent((500, 500), offset=(2, 5))) is EventResult.IGNORED
        assert view.on_event(MouseEvent((2 + 70 + 5, 5), offset=(2, 5))) is EventResult.IGNORED
        assert view.on_event(MouseEvent((2 + 4, 5 + 2), offset=(2, 5))) is EventResult.IGNORED
        assert view.cursor == Cursor(1, 0)

    def test_mouse_press_past_data_inside_area_is_clamped(self) -> None:
        view = HexView(bytes(20), state=DisplayState.ENABLED)
        # the last row holds 4 bytes, hex column 40 lies right of them
        assert view.on_event(MouseEvent((2 + 4 + 40, 5 + 1), offset=(2, 5))) is EventResult.CONSUMED
        assert view.cursor == Cursor(7, 1)
        assert view.on_event(MouseEvent((2 + 69, 5 + 1), offset=(2, 5))) is EventResult.CONSUMED
        assert view.cursor == Cursor(7, 1)

    def test_mouse_press_before_origin_is_ignored(self) -> None:
        view = HexView(bytes(20), state=DisplayState.ENABLED)
        view.on_event(RIGHT)
        assert view.on_event(MouseEvent((1, 9), offset=(2, 5))) is EventResult.IGNORED
        assert view.on_event(MouseEvent((9, 4), offset=(2, 5))) is EventResult.IGNORED
        assert view.cursor == Cursor(1, 0)


class TestEditing:
    """Tests for the editable state."""

    def test_nibble_edits_set_byte(self) -> None:
        view = _editable(b"\x00\x11\x22\x33")
        for _ in range(4):
            view.on_event(RIGHT)
        assert view.cursor == Cursor(4, 0)
        assert _type(view, "ab") == [EventResult.CONSUMED] * 2
        assert view.data == b"\x00\x11\xAB\x33"
        assert view.cursor == Cursor(6, 0)

    def test_edit_session_on_ascii_bytes(self) -> None:
        view = _editable(b"AB")
        _type(view, "cd")
        assert view.data == b"\xCD\x42"
        assert view.cursor == Cursor(2, 0)
        _type(view, "12")
        assert view.data == b"\xCD\x12"
        # the edit at the last nibble stays consumed, the advance is dropped
        assert view.cursor == Cursor(3, 0)
        assert view.on_event(RIGHT) is EventResult.IGNORED

    def test_right_presses_between_edits_stop_at_row_end(self) -> None:
        view = _editable(b"AB")
        _type(view, "cd")
        assert [view.on_event(RIGHT), view.on_event(RIGHT)] == [EventResult.CONSUMED, EventResult.IGNORED]
        assert view.cursor == Cursor(3, 0)
        # both digits land on the low nibble of byte 1
        assert _type(view, "12") == [EventResult.CONSUMED] * 2
        assert view.data == b"\xCD\x42"
        assert view.cursor == Cursor(3, 0)

    def test_low_nibble_keeps_high_nibble(self) -> None:
        view = _editable(b"\x5A")
        view.on_event(RIGHT)
        view.on_event(CharEvent("3"))
        assert view.data == b"\x53"

    def test_uppercase_hex_digits(self) -> None:
        view = _editable(b"\x00")
        _type(view, "FE")
        assert view.data == b"\xFE"

    def test_plus_and_minus(self) -> None:
        view = _editable(b"AB")
        assert view.on_event(CharEvent("+")) is EventResult.CONSUMED
        assert view.data == b"AB\x00"
        assert view.on_event(CharEvent("-")) is EventResult.CONSUMED
        assert view.on_event(CharEvent("-")) is EventResult.CONSUMED
        assert view.data == b"A"

    def test_minus_on_empty_buffer_saturates(self) -> None:
        view = _editable(b"")
        assert view.on_event(CharEvent("-")) is EventResult.CONSUMED
        assert view.is_empty()

    def test_hex_digit_without_byte_is_ignored(self) -> None:
        view = _editable(b"")
        assert view.on_event(CharEvent("a")) is EventResult.IGNORED
        assert view.is_empty()

    def test_grow_from_empty_then_edit(self) -> None:
        view = _editable(b"")
        view.on_event(CharEvent("+"))
        _type(view, "7f")
        assert view.data == b"\x7F"

    @pytest.mark.parametrize("char", ["g", "q", "x", " ", "\n", "ab"])
    def test_other_characters_are_ignored(self, char: str) -> None:
        view = _editable(b"AB")
        assert view.on_event(CharEvent(char)) is EventResult.IGNORED
        assert view.data == b"AB"

    def test_element_under_cursor(self) -> None:
        view = _editable(b"AB")
        assert view.element_under_cursor() == 0x41
        view.on_event(KeyEvent(Key.END))
        assert view.element_under_cursor() == 0x42
        assert _editable(b"").element_under_cursor() is None


class TestCursorInvariant:
    """Random event sequences must keep the cursor inside the data."""

    EVENTS = [
        RIGHT, LEFT, UP, DOWN,
        KeyEvent(Key.HOME), KeyEvent(Key.END),
        KeyEvent(Key.HOME, shift=True), KeyEvent(Key.END, shift=True),
        CharEvent("+"), CharEvent("-"), CharEvent("-"), CharEvent("a"), CharEvent("7"),
    ]

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("config", [
        HexViewConfig(),
        HexViewConfig(bytes_per_line=3, bytes_per_group=2, group_separator="::"),
        HexViewConfig(bytes_per_line=1, bytes_per_group=1, show_ascii=False),
    ])
    def test_cursor_stays_valid(self, seed: int, config: HexViewConfig) -> None:
        rng = random.Random(seed)
        view = _editable(bytes(rng.randrange(0, 40)), config)

        for _ in range(400):
            if rng.random() < 0.1:
                event = MouseEvent((rng.randrange(-5, 120), rng.randrange(-5, 20)))
            else:
                event = rng.choice(self.EVENTS)
            view.on_event(event)

            layout = view.layout()
            cursor = view.cursor
            assert 0 <= cursor.y < layout.rows
            assert 0 <= cursor.x <= layout.max_x_in_row(cursor.y)


class TestRequiredSize:
    """Tests for required_size."""

    def test_default(self) -> None:
        assert HexView(b"ABCD").required_size() == (69, 1)

    def test_empty_view_has_one_row(self) -> None:
        assert HexView().required_size() == (69, 1)

    def test_without_ascii(self) -> None:
        assert HexView(bytes(40), HexViewConfig(show_ascii=False)).required_size() == (51, 3)
