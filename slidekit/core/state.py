"""Carousel runtime state and its validating constructor."""

from dataclasses import dataclass, field

from slidekit.core.config import DEFAULT_CONFIG, CarouselConfig
from slidekit.core.errors import (
    InitialSlideOutOfBoundsError,
    InvalidCarouselIdError,
    InvalidSlidesPerViewError,
    NoSlidesError,
)

# Separates fields in event tokens, so it can never appear inside an id
TOKEN_DELIMITER = "|"


@dataclass(frozen=True)
class CarouselState:
    """State for one carousel widget.

    Instances are never mutated; the transition engine returns a new state for
    every change. Build them with ``create_carousel`` so the invariants hold.

    Attributes:
        carousel_id: Routing id used in event tokens.
        active_index: Currently displayed slide, in ``[0, slide_count)``.
        slide_count: Total number of slides, fixed for the widget's lifetime.
        is_dragging: Whether a pointer or touch drag is in progress.
        start_x: Where the current drag began. Only meaningful while dragging.
        drag_offset_px: Signed horizontal distance since the drag began.
            Always 0 when not dragging.
        config: The validated configuration.
    """

    carousel_id: str
    active_index: int
    slide_count: int
    is_dragging: bool = False
    start_x: float = 0.0
    drag_offset_px: float = 0.0
    config: CarouselConfig = field(default=DEFAULT_CONFIG)

    @property
    def has_next(self) -> bool:
        return self.active_index < self.slide_count - 1

    @property
    def has_prev(self) -> bool:
        return self.active_index > 0


def create_carousel(
    carousel_id: str,
    config: CarouselConfig,
    slide_count: int,
) -> CarouselState:
    """Validate the inputs and build the initial state.

    Checks run in a fixed order and the first failure is raised, so error
    messages stay stable for a given bad input.

    Args:
        carousel_id: Routing id; must not contain ``|``.
        config: Carousel configuration.
        slide_count: Number of slides the widget renders.

    Returns:
        A resting state showing ``config.initial_slide``.

    Raises:
        InvalidCarouselIdError: If the id contains the token delimiter.
        NoSlidesError: If there are no slides.
        InvalidSlidesPerViewError: If ``slides_per_view`` is not positive.
        InitialSlideOutOfBoundsError: If ``initial_slide`` addresses no slide.
    """
    if TOKEN_DELIMITER in carousel_id:
        raise InvalidCarouselIdError(carousel_id)
    if slide_count < 1:
        raise NoSlidesError()
    if not config.slides_per_view > 0:
        raise InvalidSlidesPerViewError(config.slides_per_view)
    if not 0 <= config.initial_slide < slide_count:
        raise InitialSlideOutOfBoundsError(config.initial_slide, slide_count)

    return CarouselState(
        carousel_id=carousel_id,
        active_index=config.initial_slide,
        slide_count=slide_count,
        is_dragging=False,
        start_x=0.0,
        drag_offset_px=0.0,
        config=config,
    )
