"""In-memory registry routing decoded events to carousel instances.

A page can host several carousels that share one dispatch channel. The
registry keeps the current state of each by id, decodes incoming tokens,
and applies each event to the carousel it names.

Example:
    registry = CarouselRegistry()
    registry.register("games", load_config(), slide_count=3)

    registry.dispatch("Carousel|games|MouseDown", b"200,50")
    view = registry.view("games")
"""

from collections.abc import Iterator

from slidekit.core.carousel_logic import apply_event
from slidekit.core.codec import decode
from slidekit.core.config import CarouselConfig
from slidekit.core.errors import UnknownCarouselError, UnknownEventError
from slidekit.core.events import CarouselEvent
from slidekit.core.geometry import CarouselView, build_view
from slidekit.core.logging import get_logger
from slidekit.core.state import CarouselState, create_carousel

logger = get_logger(__name__)


class CarouselRegistry:
    """Holds carousel states keyed by id.

    Suitable for a single host process. Events are applied in the order they
    are dispatched; callers serialize access if events can arrive concurrently.
    """

    def __init__(self) -> None:
        self._states: dict[str, CarouselState] = {}

    def register(
        self,
        carousel_id: str,
        config: CarouselConfig,
        slide_count: int,
    ) -> CarouselState:
        """Create a carousel and start routing events to it.

        Registering an id again replaces the previous instance.

        Raises:
            CarouselInitError: If the carousel cannot be constructed.
        """
        state = create_carousel(carousel_id, config, slide_count)
        replaced = carousel_id in self._states
        self._states[carousel_id] = state
        logger.info(
            "carousel_registered",
            carousel_id=carousel_id,
            slide_count=slide_count,
            active_index=state.active_index,
            replaced=replaced,
        )
        return state

    def unregister(self, carousel_id: str) -> None:
        """Forget a carousel; unknown ids are ignored."""
        if self._states.pop(carousel_id, None) is not None:
            logger.info("carousel_unregistered", carousel_id=carousel_id)

    def get(self, carousel_id: str) -> CarouselState:
        """Return the current state of a carousel.

        Raises:
            UnknownCarouselError: If no carousel has this id.
        """
        try:
            return self._states[carousel_id]
        except KeyError:
            raise UnknownCarouselError(carousel_id) from None

    def view(self, carousel_id: str) -> CarouselView:
        """Return render parameters for a carousel.

        Raises:
            UnknownCarouselError: If no carousel has this id.
        """
        return build_view(self.get(carousel_id))

    def apply(self, carousel_id: str, event: CarouselEvent) -> CarouselState:
        """Apply an event to one carousel and store the result.

        Raises:
            UnknownCarouselError: If no carousel has this id.
        """
        previous = self.get(carousel_id)
        state = apply_event(previous, event)
        self._states[carousel_id] = state

        if state.active_index != previous.active_index:
            logger.info(
                "carousel_slide_changed",
                carousel_id=carousel_id,
                event_type=type(event).__name__,
                from_index=previous.active_index,
                to_index=state.active_index,
            )
        return state

    def dispatch(self, token: str, payload: bytes | str = b"") -> CarouselState | None:
        """Decode a token and route it to its carousel.

        Tokens that are not carousel events, or that name a carousel this
        registry does not hold, are ignored.

        Args:
            token: Event token from the dispatch layer.
            payload: Raw coordinate payload.

        Returns:
            The carousel's new state, or None if the event was ignored.
        """
        try:
            carousel_id, event = decode(token, payload)
        except UnknownEventError as ex:
            logger.debug(
                "carousel_event_ignored",
                reason="unknown_event",
                token=ex.token,
            )
            return None

        if carousel_id not in self._states:
            logger.debug(
                "carousel_event_ignored",
                reason="unknown_carousel",
                carousel_id=carousel_id,
            )
            return None

        return self.apply(carousel_id, event)

    def ids(self) -> list[str]:
        return list(self._states)

    def __contains__(self, carousel_id: object) -> bool:
        return carousel_id in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)
