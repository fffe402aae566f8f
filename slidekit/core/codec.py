"""String token protocol for routing DOM events to carousel instances.

The host's event-dispatch layer only carries a string and a raw byte payload,
so every carousel event is named by a token of the form::

    Carousel|<carousel_id>|<tag>[|<argument>]

Pointer and touch events put their coordinates in the payload as ``"x,y"``.
Navigation events need no payload; ``GoToSlide`` carries its index as the
token argument.

Example:
    from slidekit.core.codec import decode, encode
    from slidekit.core.events import GoToSlide

    token = encode("games", GoToSlide(2))  # "Carousel|games|GoToSlide|2"
    carousel_id, event = decode(token)
"""

import math

from slidekit.core.errors import UnknownEventError
from slidekit.core.events import (
    CarouselEvent,
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
from slidekit.core.state import TOKEN_DELIMITER

TOKEN_PREFIX = "Carousel"
COORD_SEPARATOR = ","
GO_TO_SLIDE_TAG = "GoToSlide"

# Tags whose coordinates travel in the payload
COORDINATE_EVENTS: dict[str, type] = {
    "TouchStart": TouchStart,
    "TouchMove": TouchMove,
    "TouchEnd": TouchEnd,
    "MouseDown": MouseDown,
    "MouseMove": MouseMove,
    "MouseUp": MouseUp,
}

# Tags that carry nothing at all
BARE_EVENTS: dict[str, type] = {
    "MouseLeave": MouseLeave,
    "PrevSlide": PrevSlide,
    "NextSlide": NextSlide,
}

_TAG_BY_TYPE: dict[type, str] = {
    cls: tag for tag, cls in {**COORDINATE_EVENTS, **BARE_EVENTS}.items()
}
_TAG_BY_TYPE[GoToSlide] = GO_TO_SLIDE_TAG


def event_token(carousel_id: str, tag: str, argument: str | None = None) -> str:
    """Build a raw token for ``tag``.

    Hosts use this to wire pointer and touch listeners, whose coordinates are
    sent separately as the payload.
    """
    parts = [TOKEN_PREFIX, carousel_id, tag]
    if argument is not None:
        parts.append(argument)
    return TOKEN_DELIMITER.join(parts)


def encode(carousel_id: str, event: CarouselEvent) -> str:
    """Encode an event as a token.

    Args:
        carousel_id: Id of the target carousel.
        event: The event to name. Coordinates of pointer events are not part
            of the token; see ``encode_coords``.

    Returns:
        The token string.

    Raises:
        TypeError: If ``event`` is not a carousel event.
    """
    tag = _TAG_BY_TYPE.get(type(event))
    if tag is None:
        raise TypeError(f"Not a carousel event: {event!r}")
    if isinstance(event, GoToSlide):
        return event_token(carousel_id, tag, str(event.index))
    return event_token(carousel_id, tag)


def encode_coords(x: float, y: float) -> bytes:
    """Render a coordinate payload as accepted by ``parse_coords``."""
    return f"{x!r}{COORD_SEPARATOR}{y!r}".encode()


def _parse_coord(text: str) -> float:
    # float() also takes padding and "1_0"; a coordinate field is bare
    if "_" in text or text != text.strip():
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def parse_coords(payload: bytes | str) -> tuple[float, float]:
    """Read ``"x,y"`` from a payload without ever failing.

    Invalid UTF-8 is replaced, not rejected. A coordinate that is missing or
    does not parse as a finite number becomes ``0.0``; without a comma both
    do. Fields after the second are ignored.

    Args:
        payload: Raw bytes from the dispatch layer, or already decoded text.

    Returns:
        The ``(x, y)`` pair.
    """
    if isinstance(payload, bytes | bytearray):
        text = bytes(payload).decode("utf-8", errors="replace")
    else:
        text = payload

    x_text, sep, rest = text.partition(COORD_SEPARATOR)
    if not sep:
        return 0.0, 0.0
    y_text = rest.split(COORD_SEPARATOR, 1)[0]
    return _parse_coord(x_text), _parse_coord(y_text)


def _parse_index(text: str) -> int | None:
    if text and text.isascii() and text.isdigit():
        return int(text)
    return None


def decode(token: str, payload: bytes | str = b"") -> tuple[str, CarouselEvent]:
    """Parse a token and payload into the target id and event.

    Args:
        token: Token produced by ``encode``/``event_token`` or by host wiring.
        payload: Raw coordinate payload for pointer and touch events.

    Returns:
        Tuple of (carousel_id, event).

    Raises:
        UnknownEventError: If the token is not a carousel token. A bad prefix
            reports the whole token; an unknown or malformed event reports only
            the part after the carousel id.
    """
    prefix, sep, remainder = token.partition(TOKEN_DELIMITER)
    if not sep or prefix != TOKEN_PREFIX:
        raise UnknownEventError(token)

    carousel_id, sep, event_str = remainder.partition(TOKEN_DELIMITER)
    if not sep:
        raise UnknownEventError(token)

    coordinate_event = COORDINATE_EVENTS.get(event_str)
    if coordinate_event is not None:
        x, y = parse_coords(payload)
        return carousel_id, coordinate_event(x, y)

    bare_event = BARE_EVENTS.get(event_str)
    if bare_event is not None:
        return carousel_id, bare_event()

    tag, sep, argument = event_str.partition(TOKEN_DELIMITER)
    if sep and tag == GO_TO_SLIDE_TAG:
        index = _parse_index(argument)
        if index is not None:
            return carousel_id, GoToSlide(index)

    raise UnknownEventError(event_str)
