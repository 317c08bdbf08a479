from ._spline_error import SplineError


class ExtrapolationError(SplineError):
    """Raised when query point is outside spline domain with extrapolate='error'."""

    pass


class ExtrapolationWarning(UserWarning):
    """Emitted when query points are extrapolated with extrapolate='warn'."""

    pass
