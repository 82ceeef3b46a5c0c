"""Domain exceptions for room furnishing."""


class FurnishingError(Exception):
    """Base class for errors raised while furnishing a room."""

    pass


class FurnishingConfigurationError(FurnishingError):
    """Raised when a furnishing run cannot start because a precondition is missing.

    Examples are a room category without priorities, a priority category
    without any fitting model, or a fitting model with malformed clearances.
    """

    pass


class FurnishingCancelledError(FurnishingError):
    """Raised when a furnishing run is cancelled through its cancellation token."""

    def __init__(self, iteration: int) -> None:
        self.iteration = iteration
        super().__init__(f"Furnishing cancelled at iteration {iteration}")
