"""Exception hierarchy for carousel construction and event decoding.

Two families of failure exist:

1. Construction errors (``CarouselInitError`` subclasses), raised only when a
   carousel is created. They are recoverable: a host may skip the widget or
   retry with a substitute configuration.
2. Protocol errors (``UnknownEventError``), raised only by the codec when a
   token does not follow the carousel grammar. Unrelated DOM events share the
   same dispatch channel, so callers are expected to ignore these.

Everything else in the core is total and never raises.

Example:
    from slidekit.core.errors import CarouselInitError, UnknownEventError

    try:
        state = create_carousel("games", config, slide_count=0)
    except CarouselInitError as ex:
        logger.warning("carousel_init_failed", error=str(ex))
"""


class CarouselError(Exception):
    """Base class for every error raised by slidekit."""

    pass


class CarouselInitError(CarouselError):
    """Error raised when a carousel cannot be constructed."""

    pass


class InvalidCarouselIdError(CarouselInitError):
    """The carousel id contains the token delimiter.

    Attributes:
        carousel_id: The rejected id.
    """

    def __init__(self, carousel_id: str) -> None:
        super().__init__(f"Carousel id must not contain '|': {carousel_id!r}")
        self.carousel_id = carousel_id


class NoSlidesError(CarouselInitError):
    """The carousel was created without any slides."""

    def __init__(self) -> None:
        super().__init__("Carousel must have at least one slide")


class InvalidSlidesPerViewError(CarouselInitError):
    """slides_per_view is zero or negative.

    Attributes:
        slides_per_view: The rejected value.
    """

    def __init__(self, slides_per_view: float) -> None:
        super().__init__(
            f"slides_per_view must be greater than 0, got {slides_per_view}"
        )
        self.slides_per_view = slides_per_view


class InitialSlideOutOfBoundsError(CarouselInitError):
    """initial_slide does not address an existing slide.

    Attributes:
        initial_slide: The configured starting index.
        slide_count: Number of slides the carousel was created with.
    """

    def __init__(self, initial_slide: int, slide_count: int) -> None:
        super().__init__(
            f"initial_slide {initial_slide} is out of bounds "
            f"for {slide_count} slide(s)"
        )
        self.initial_slide = initial_slide
        self.slide_count = slide_count


class UnknownEventError(CarouselError):
    """A token did not match the carousel event grammar.

    Attributes:
        token: The unrecognized string. For a bad prefix this is the whole
            token; for a malformed GoToSlide argument it is only the event
            fragment after the carousel id.
    """

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown carousel event: {token!r}")
        self.token = token


class UnknownCarouselError(CarouselError):
    """A registry lookup named a carousel that was never registered.

    Attributes:
        carousel_id: The id that was looked up.
    """

    def __init__(self, carousel_id: str) -> None:
        super().__init__(f"No carousel registered with id {carousel_id!r}")
        self.carousel_id = carousel_id
