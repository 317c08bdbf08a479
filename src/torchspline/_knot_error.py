from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for invalid knots (non-monotonic, too few, zero-length chords)."""

    pass
