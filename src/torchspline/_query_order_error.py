from ._spline_error import SplineError


class QueryOrderError(SplineError):
    """Raised when query abscissas are not in non-decreasing order."""

    pass
