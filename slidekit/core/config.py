"""Carousel configuration.

``CarouselConfig`` is the immutable value handed to ``create_carousel``. It is
a plain dataclass so the pure core never depends on a validation library;
``create_carousel`` performs the checks whose order callers rely on.

``CarouselSettings`` is the pydantic model hosts use to build a config from
loosely typed input (a JSON document, a dict from a template, or the
environment).

Example:
    from slidekit.core.config import load_config, load_config_from_env

    config = load_config({"slides_per_view": 2.5, "drag_threshold_px": 40})
    config = load_config_from_env()  # reads CAROUSEL_* variables
"""

from collections.abc import Mapping
from dataclasses import dataclass
from os import getenv
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from slidekit.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SLIDES_PER_VIEW = 1.0
DEFAULT_DRAG_THRESHOLD_PX = 50
DEFAULT_ANIMATION_DURATION_MS = 300

ENV_PREFIX = "CAROUSEL_"


@dataclass(frozen=True)
class CarouselConfig:
    """Construction parameters for a carousel.

    Attributes:
        slides_per_view: Slides visible at once (1.0 = one slide fills the viewport).
        initial_slide: Index of the slide shown first.
        navigation: Whether prev/next buttons are rendered.
        drag_threshold_px: Horizontal drag distance needed to change slide.
        animation_duration_ms: Transition duration when not dragging.
    """

    slides_per_view: float = DEFAULT_SLIDES_PER_VIEW
    initial_slide: int = 0
    navigation: bool = True
    drag_threshold_px: int = DEFAULT_DRAG_THRESHOLD_PX
    animation_duration_ms: int = DEFAULT_ANIMATION_DURATION_MS


DEFAULT_CONFIG = CarouselConfig()


class CarouselSettings(BaseModel):
    """Validated, loosely typed source for a ``CarouselConfig``."""

    slides_per_view: float = Field(
        DEFAULT_SLIDES_PER_VIEW,
        gt=0,
        description="Slides visible in the viewport at once",
    )
    initial_slide: int = Field(0, ge=0, description="Starting slide index")
    navigation: bool = Field(True, description="Render prev/next buttons")
    drag_threshold_px: int = Field(
        DEFAULT_DRAG_THRESHOLD_PX,
        ge=0,
        description="Minimum drag distance in pixels to change slide",
    )
    animation_duration_ms: int = Field(
        DEFAULT_ANIMATION_DURATION_MS,
        ge=0,
        description="Transition duration in milliseconds",
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "slides_per_view": 1.0,
                "initial_slide": 0,
                "navigation": True,
                "drag_threshold_px": 50,
                "animation_duration_ms": 300,
            }
        },
    )

    def to_config(self) -> CarouselConfig:
        """Convert to the immutable config used by the core."""
        return CarouselConfig(
            slides_per_view=self.slides_per_view,
            initial_slide=self.initial_slide,
            navigation=self.navigation,
            drag_threshold_px=self.drag_threshold_px,
            animation_duration_ms=self.animation_duration_ms,
        )


def load_config(data: Mapping[str, Any] | None = None) -> CarouselConfig:
    """Build a config from a mapping, filling gaps with defaults.

    Args:
        data: Field values keyed by ``CarouselConfig`` field name.

    Returns:
        The validated configuration.

    Raises:
        pydantic.ValidationError: If a value has the wrong type or range, or
            an unknown key is present.
    """
    settings = CarouselSettings.model_validate(dict(data or {}))
    return settings.to_config()


def load_config_from_env(prefix: str = ENV_PREFIX) -> CarouselConfig:
    """Build a config from environment variables.

    Each field is read from ``<prefix><FIELD_NAME>`` (for example
    ``CAROUSEL_DRAG_THRESHOLD_PX``). Unset variables keep their defaults.

    Args:
        prefix: Environment variable prefix.

    Returns:
        The validated configuration.

    Raises:
        pydantic.ValidationError: If a variable cannot be coerced to its field.
    """
    data: dict[str, str] = {}
    for name in CarouselSettings.model_fields:
        value = getenv(f"{prefix}{name.upper()}")
        if value is not None:
            data[name] = value

    config = load_config(data)
    logger.debug(
        "carousel_config_loaded",
        source="environment",
        overridden=sorted(data),
    )
    return config
