"""Tests for the carousel event token protocol."""

import pytest

from slidekit.core.codec import decode, encode, encode_coords, event_token, parse_coords
from slidekit.core.errors import UnknownEventError
from slidekit.core.events import (
    GoToSlide,
    MouseDown,
    MouseLeave,
    MouseMove,
    MouseUp,
    NextSlide,
    PrevSlide,
    TouchEnd,
    TouchMove,
    TouchStart,
)


class TestEncode:
    """Tests for encode and event_token."""

    def test_encode_prev_slide(self) -> None:
        assert encode("games", PrevSlide()) == "Carousel|games|PrevSlide"

    def test_encode_next_slide(self) -> None:
        assert encode("games", NextSlide()) == "Carousel|games|NextSlide"

    def test_encode_go_to_slide(self) -> None:
        assert encode("games", GoToSlide(12)) == "Carousel|games|GoToSlide|12"

    def test_encode_pointer_event_omits_coordinates(self) -> None:
        assert encode("games", MouseDown(3, 4)) == "Carousel|games|MouseDown"

    def test_encode_rejects_non_events(self) -> None:
        with pytest.raises(TypeError):
            encode("games", "PrevSlide")  # type: ignore[arg-type]

    def test_event_token(self) -> None:
        assert event_token("hero", "TouchMove") == "Carousel|hero|TouchMove"
        assert event_token("hero", "GoToSlide", "0") == "Carousel|hero|GoToSlide|0"

    def test_encode_coords(self) -> None:
        assert encode_coords(200.0, 50.5) == b"200.0,50.5"


class TestDecode:
    """Tests for decode."""

    def test_decode_go_to_slide(self) -> None:
        assert decode("Carousel|games|GoToSlide|2", b"") == ("games", GoToSlide(2))

    def test_navigation_round_trip(self) -> None:
        """Should decode every encoded navigation event back to itself."""
        events = [PrevSlide(), NextSlide(), GoToSlide(0), GoToSlide(7)]
        for carousel_id in ("games", "", "hero-banner", "with space", "ünïcode"):
            for event in events:
                assert decode(encode(carousel_id, event), b"") == (carousel_id, event)

    def test_decode_coordinate_events(self) -> None:
        expected = {
            "TouchStart": TouchStart(12.5, -3.0),
            "TouchMove": TouchMove(12.5, -3.0),
            "TouchEnd": TouchEnd(12.5, -3.0),
            "MouseDown": MouseDown(12.5, -3.0),
            "MouseMove": MouseMove(12.5, -3.0),
            "MouseUp": MouseUp(12.5, -3.0),
        }
        for tag, event in expected.items():
            assert decode(f"Carousel|games|{tag}", b"12.5,-3") == ("games", event)

    def test_decode_coordinates_from_text_payload(self) -> None:
        assert decode("Carousel|games|MouseMove", "7,8") == ("games", MouseMove(7.0, 8.0))

    def test_decode_malformed_coordinates_default_to_zero(self) -> None:
        assert decode("Carousel|games|MouseDown", b"abc") == ("games", MouseDown(0.0, 0.0))

    def test_decode_mouse_leave_ignores_payload(self) -> None:
        assert decode("Carousel|games|MouseLeave", b"1,2") == ("games", MouseLeave())

    def test_decode_default_payload(self) -> None:
        assert decode("Carousel|games|NextSlide") == ("games", NextSlide())

    def test_empty_carousel_id(self) -> None:
        assert decode("Carousel||PrevSlide", b"") == ("", PrevSlide())

    def test_wrong_prefix_reports_full_token(self) -> None:
        with pytest.raises(UnknownEventError) as exc_info:
            decode("NotACarouselEvent", b"")
        assert exc_info.value.token == "NotACarouselEvent"

    def test_other_prefix_reports_full_token(self) -> None:
        with pytest.raises(UnknownEventError) as exc_info:
            decode("Slider|games|NextSlide", b"")
        assert exc_info.value.token == "Slider|games|NextSlide"

    def test_missing_event_reports_full_token(self) -> None:
        with pytest.raises(UnknownEventError) as exc_info:
            decode("Carousel|games", b"")
        assert exc_info.value.token == "Carousel|games"

    def test_unknown_tag_reports_fragment(self) -> None:
        with pytest.raises(UnknownEventError) as exc_info:
            decode("Carousel|games|DoubleClick", b"")
        assert exc_info.value.token == "DoubleClick"

    def test_malformed_go_to_slide_reports_fragment(self) -> None:
        for fragment in ("GoToSlide|two", "GoToSlide|-1", "GoToSlide|", "GoToSlide"):
            with pytest.raises(UnknownEventError) as exc_info:
                decode(f"Carousel|games|{fragment}", b"")
            assert exc_info.value.token == fragment

    def test_tag_with_trailing_argument_is_unknown(self) -> None:
        with pytest.raises(UnknownEventError) as exc_info:
            decode("Carousel|games|NextSlide|1", b"")
        assert exc_info.value.token == "NextSlide|1"


class TestParseCoords:
    """Tests for the lenient coordinate parser."""

    def test_parses_pair(self) -> None:
        assert parse_coords(b"200,50") == (200.0, 50.0)

    def test_parses_floats(self) -> None:
        assert parse_coords(b"-12.25,3e2") == (-12.25, 300.0)

    def test_empty_payload(self) -> None:
        assert parse_coords(b"") == (0.0, 0.0)

    def test_lone_comma(self) -> None:
        assert parse_coords(b",") == (0.0, 0.0)

    def test_non_numeric(self) -> None:
        assert parse_coords(b"left,top") == (0.0, 0.0)

    def test_no_comma(self) -> None:
        assert parse_coords(b"42") == (0.0, 0.0)

    def test_one_side_invalid(self) -> None:
        assert parse_coords(b"10,oops") == (10.0, 0.0)
        assert parse_coords(b"oops,10") == (0.0, 10.0)

    def test_extra_fields_ignored(self) -> None:
        assert parse_coords(b"1,2,3") == (1.0, 2.0)

    def test_invalid_utf8_replaced(self) -> None:
        assert parse_coords(b"\xff\xfe,5") == (0.0, 5.0)

    def test_non_finite_values_default_to_zero(self) -> None:
        assert parse_coords(b"nan,inf") == (0.0, 0.0)

    def test_padded_or_separated_fields_default_to_zero(self) -> None:
        assert parse_coords(b" 1_0 ,5") == (0.0, 5.0)
        assert parse_coords(b"1_0,2") == (0.0, 2.0)
        assert parse_coords(b"3, 4") == (3.0, 0.0)

    def test_accepts_text(self) -> None:
        assert parse_coords("3.5,4") == (3.5, 4.0)
