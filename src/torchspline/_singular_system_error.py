from ._spline_error import SplineError


class SingularSystemError(SplineError):
    """Raised when a tridiagonal system is not positive definite."""

    pass
