"""Presentation values derived from carousel state.

These are the numbers and CSS strings a rendering layer needs: the width of
each slide, the track's transform and transition, and the nav button classes.
All functions are pure.
"""

import math
from dataclasses import dataclass

from slidekit.core.state import CarouselState

DISABLED_BUTTON_CLASS = "carousel-button-disabled"
PREV_BUTTON_CLASS = "carousel-button carousel-button-prev"
NEXT_BUTTON_CLASS = "carousel-button carousel-button-next"


def format_number(value: float) -> str:
    """Render a number for CSS.

    Integral values drop the fractional part (``-100``), everything else uses
    the shortest round-trip form. Negative zero stays ``-0``.
    """
    value = float(value)
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def slide_width_percent(slides_per_view: float) -> float:
    """Width of one slide as a percentage of the viewport.

    A non-positive or NaN ``slides_per_view`` falls back to one slide per view.
    """
    if not slides_per_view > 0:
        return 100.0
    return 100 / slides_per_view


def transform(
    active_index: int,
    slides_per_view: float,
    is_dragging: bool,
    drag_offset_px: float,
) -> str:
    """CSS transform that shifts the track to the active slide.

    While dragging, the pixel offset is layered on top of the slide offset so
    the track follows the pointer.
    """
    base = format_number(-(active_index * slide_width_percent(slides_per_view)))
    if is_dragging:
        offset = format_number(drag_offset_px)
        return f"translate3d(calc({base}% + {offset}px), 0, 0)"
    return f"translate3d({base}%, 0, 0)"


def transition_style(is_dragging: bool, animation_duration_ms: int) -> str:
    """CSS transition for the track; disabled while dragging."""
    if is_dragging:
        return "none"
    return f"transform {animation_duration_ms}ms ease-out"


def nav_button_class(base_class: str, is_disabled: bool) -> str:
    if is_disabled:
        return f"{base_class} {DISABLED_BUTTON_CLASS}"
    return base_class


def is_prev_disabled(active_index: int) -> bool:
    return active_index == 0


def is_next_disabled(active_index: int, slide_count: int) -> bool:
    return active_index >= slide_count - 1


@dataclass(frozen=True)
class CarouselView:
    """Everything needed to render one carousel frame.

    Attributes:
        active_index: Currently displayed slide.
        slide_count: Total number of slides.
        slide_width_percent: Width of each slide relative to the viewport.
        transform: CSS ``transform`` value for the slide track.
        transition: CSS ``transition`` value for the slide track.
        show_navigation: Whether prev/next buttons are rendered at all.
        prev_disabled: Whether the previous button is disabled.
        next_disabled: Whether the next button is disabled.
        prev_button_class: CSS class list for the previous button.
        next_button_class: CSS class list for the next button.
    """

    active_index: int
    slide_count: int
    slide_width_percent: float
    transform: str
    transition: str
    show_navigation: bool
    prev_disabled: bool
    next_disabled: bool
    prev_button_class: str
    next_button_class: str


def build_view(
    state: CarouselState,
    prev_class: str = PREV_BUTTON_CLASS,
    next_class: str = NEXT_BUTTON_CLASS,
) -> CarouselView:
    """Derive every render parameter for ``state``."""
    config = state.config
    prev_disabled = is_prev_disabled(state.active_index)
    next_disabled = is_next_disabled(state.active_index, state.slide_count)
    return CarouselView(
        active_index=state.active_index,
        slide_count=state.slide_count,
        slide_width_percent=slide_width_percent(config.slides_per_view),
        transform=transform(
            state.active_index,
            config.slides_per_view,
            state.is_dragging,
            state.drag_offset_px,
        ),
        transition=transition_style(
            state.is_dragging, config.animation_duration_ms
        ),
        show_navigation=config.navigation,
        prev_disabled=prev_disabled,
        next_disabled=next_disabled,
        prev_button_class=nav_button_class(prev_class, prev_disabled),
        next_button_class=nav_button_class(next_class, next_disabled),
    )
