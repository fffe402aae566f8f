"""Shared pytest fixtures for slidekit tests."""

import pytest

from slidekit.core.config import CarouselConfig
from slidekit.core.state import CarouselState, create_carousel


@pytest.fixture
def default_config() -> CarouselConfig:
    """Provide the configuration used throughout the drag scenarios.

    Returns:
        CarouselConfig: One slide per view, 50px threshold, 300ms animation.
    """
    return CarouselConfig(
        slides_per_view=1.0,
        initial_slide=0,
        navigation=True,
        drag_threshold_px=50,
        animation_duration_ms=300,
    )


@pytest.fixture
def three_slides(default_config: CarouselConfig) -> CarouselState:
    """Provide a resting three-slide carousel on its first slide.

    Returns:
        CarouselState: State for carousel "games".
    """
    return create_carousel("games", default_config, slide_count=3)
