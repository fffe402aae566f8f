"""Carousel core: state, transitions, event protocol and render geometry.

Everything except the registry and logging helpers is pure and synchronous.
"""

from slidekit.core.carousel_logic import CarouselController, apply_event
from slidekit.core.codec import (
    decode,
    encode,
    encode_coords,
    event_token,
    parse_coords,
)
from slidekit.core.config import (
    DEFAULT_CONFIG,
    CarouselConfig,
    CarouselSettings,
    load_config,
    load_config_from_env,
)
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
from slidekit.core.events import (
    CarouselEvent,
    GoToSlide,
    MouseDown,
    MouseLeave,
    MouseMove,
    MouseUp,
    NavigationEvent,
    NextSlide,
    PointerEvent,
    PrevSlide,
    TouchEnd,
    TouchMove,
    TouchStart,
)
from slidekit.core.geometry import (
    CarouselView,
    build_view,
    is_next_disabled,
    is_prev_disabled,
    nav_button_class,
    slide_width_percent,
    transform,
    transition_style,
)
from slidekit.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from slidekit.core.registry import CarouselRegistry
from slidekit.core.state import CarouselState, create_carousel

__all__ = [
    # State and transitions
    "CarouselController",
    "CarouselState",
    "apply_event",
    "create_carousel",
    # Configuration
    "DEFAULT_CONFIG",
    "CarouselConfig",
    "CarouselSettings",
    "load_config",
    "load_config_from_env",
    # Events
    "CarouselEvent",
    "GoToSlide",
    "MouseDown",
    "MouseLeave",
    "MouseMove",
    "MouseUp",
    "NavigationEvent",
    "NextSlide",
    "PointerEvent",
    "PrevSlide",
    "TouchEnd",
    "TouchMove",
    "TouchStart",
    # Event protocol
    "decode",
    "encode",
    "encode_coords",
    "event_token",
    "parse_coords",
    # Error handling
    "CarouselError",
    "CarouselInitError",
    "InitialSlideOutOfBoundsError",
    "InvalidCarouselIdError",
    "InvalidSlidesPerViewError",
    "NoSlidesError",
    "UnknownCarouselError",
    "UnknownEventError",
    # Geometry
    "CarouselView",
    "build_view",
    "is_next_disabled",
    "is_prev_disabled",
    "nav_button_class",
    "slide_width_percent",
    "transform",
    "transition_style",
    # Multi-instance routing
    "CarouselRegistry",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
]
