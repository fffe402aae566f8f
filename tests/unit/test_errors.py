"""Tests for the carousel error hierarchy."""

from slidekit.core.errors import (
    CarouselError,
    CarouselInitError,
    InitialSlideOutOfBoundsError,
    InvalidCarouselIdError,
    InvalidSlidesPerViewError,
    NoSlidesError,
    UnknownCarouselError,
    UnknownEventError,
)


class TestErrorHierarchy:
    """Tests for error base classes."""

    def test_init_errors_are_carousel_init_errors(self) -> None:
        """Should group every construction failure under CarouselInitError."""
        errors = [
            InvalidCarouselIdError("a|b"),
            NoSlidesError(),
            InvalidSlidesPerViewError(0.0),
            InitialSlideOutOfBoundsError(4, 3),
        ]
        for error in errors:
            assert isinstance(error, CarouselInitError)
            assert isinstance(error, CarouselError)

    def test_protocol_errors_are_not_init_errors(self) -> None:
        """Should keep decode and lookup failures out of the init family."""
        assert not isinstance(UnknownEventError("x"), CarouselInitError)
        assert not isinstance(UnknownCarouselError("x"), CarouselInitError)
        assert isinstance(UnknownEventError("x"), CarouselError)


class TestErrorAttributes:
    """Tests for the data carried by each error."""

    def test_invalid_carousel_id(self) -> None:
        error = InvalidCarouselIdError("a|b")
        assert error.carousel_id == "a|b"
        assert "a|b" in str(error)

    def test_initial_slide_out_of_bounds(self) -> None:
        error = InitialSlideOutOfBoundsError(4, 3)
        assert error.initial_slide == 4
        assert error.slide_count == 3
        assert "4" in str(error)

    def test_invalid_slides_per_view(self) -> None:
        error = InvalidSlidesPerViewError(-2.0)
        assert error.slides_per_view == -2.0

    def test_unknown_event(self) -> None:
        error = UnknownEventError("NotACarouselEvent")
        assert error.token == "NotACarouselEvent"
        assert "NotACarouselEvent" in str(error)

    def test_unknown_carousel(self) -> None:
        assert UnknownCarouselError("hero").carousel_id == "hero"
