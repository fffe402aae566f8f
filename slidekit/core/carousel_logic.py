"""Carousel transition logic - platform agnostic.

Every method takes a state and returns the next one. Nothing here raises:
events that make no sense for the current phase (a move with no drag in
progress, a jump past the last slide) hand back the state unchanged.
"""

from dataclasses import replace

from slidekit.core.events import (
    DRAG_END_EVENTS,
    DRAG_MOVE_EVENTS,
    DRAG_START_EVENTS,
    CarouselEvent,
    GoToSlide,
    NextSlide,
    PrevSlide,
)
from slidekit.core.state import CarouselState


class CarouselController:
    """Controls carousel navigation and drag gestures."""

    def next_page(self, state: CarouselState) -> CarouselState:
        """Move to next slide, returns new state."""
        if state.has_next:
            return replace(state, active_index=state.active_index + 1)
        return state

    def prev_page(self, state: CarouselState) -> CarouselState:
        """Move to previous slide, returns new state."""
        if state.has_prev:
            return replace(state, active_index=state.active_index - 1)
        return state

    def go_to_index(self, state: CarouselState, index: int) -> CarouselState:
        """Jump to specific slide; out-of-range indices are ignored."""
        if 0 <= index < state.slide_count:
            return replace(state, active_index=index)
        return state

    def start_drag(self, state: CarouselState, x: float) -> CarouselState:
        """Anchor a drag at ``x``. Restarting an active drag moves the anchor."""
        return replace(state, is_dragging=True, start_x=x, drag_offset_px=0.0)

    def move_drag(self, state: CarouselState, x: float) -> CarouselState:
        """Track the pointer while dragging."""
        if not state.is_dragging:
            return state
        return replace(state, drag_offset_px=x - state.start_x)

    def end_drag(self, state: CarouselState) -> CarouselState:
        """Finish a drag, changing slide if it travelled past the threshold.

        Dragging left (negative offset) advances, dragging right retreats.
        A drag of exactly the threshold distance does not count.
        """
        if not state.is_dragging:
            return state

        threshold = max(float(state.config.drag_threshold_px), 0.0)
        index = state.active_index
        if state.drag_offset_px < -threshold and state.has_next:
            index += 1
        elif state.drag_offset_px > threshold and state.has_prev:
            index -= 1

        return replace(
            state,
            active_index=index,
            is_dragging=False,
            drag_offset_px=0.0,
        )

    def apply(self, state: CarouselState, event: CarouselEvent) -> CarouselState:
        """Apply any carousel event; unrecognized objects are no-ops."""
        if isinstance(event, DRAG_START_EVENTS):
            return self.start_drag(state, event.x)
        if isinstance(event, DRAG_MOVE_EVENTS):
            return self.move_drag(state, event.x)
        if isinstance(event, DRAG_END_EVENTS):
            return self.end_drag(state)
        if isinstance(event, PrevSlide):
            return self.prev_page(state)
        if isinstance(event, NextSlide):
            return self.next_page(state)
        if isinstance(event, GoToSlide):
            return self.go_to_index(state, event.index)
        return state


_controller = CarouselController()


def apply_event(state: CarouselState, event: CarouselEvent) -> CarouselState:
    """Return the state that results from ``event``."""
    return _controller.apply(state, event)
