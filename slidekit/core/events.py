"""Carousel input events.

The set is closed: pointer gestures carry the x/y coordinates reported by the
host, navigation commands carry at most a target index. All events are frozen
value objects so they compare by value and can be replayed freely.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TouchStart:
    x: float
    y: float


@dataclass(frozen=True)
class TouchMove:
    x: float
    y: float


@dataclass(frozen=True)
class TouchEnd:
    x: float
    y: float


@dataclass(frozen=True)
class MouseDown:
    x: float
    y: float


@dataclass(frozen=True)
class MouseMove:
    x: float
    y: float


@dataclass(frozen=True)
class MouseUp:
    x: float
    y: float


@dataclass(frozen=True)
class MouseLeave:
    """Pointer left the carousel while a drag may be in progress."""


@dataclass(frozen=True)
class PrevSlide:
    pass


@dataclass(frozen=True)
class NextSlide:
    pass


@dataclass(frozen=True)
class GoToSlide:
    """Jump straight to a slide (e.g. from a pagination dot)."""

    index: int


PointerEvent = TouchStart | TouchMove | TouchEnd | MouseDown | MouseMove | MouseUp
NavigationEvent = PrevSlide | NextSlide | GoToSlide
CarouselEvent = PointerEvent | MouseLeave | NavigationEvent

# Events that begin, update, or finish a drag gesture
DRAG_START_EVENTS = (TouchStart, MouseDown)
DRAG_MOVE_EVENTS = (TouchMove, MouseMove)
DRAG_END_EVENTS = (TouchEnd, MouseUp, MouseLeave)
