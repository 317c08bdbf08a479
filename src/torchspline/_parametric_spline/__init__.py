from ._parametric_spline import (
    ParametricCubicSpline,
    parametric_cubic_spline,
)
from ._parametric_spline_evaluate import parametric_cubic_spline_evaluate
from ._parametric_spline_fit import (
    parametric_cubic_spline_fit,
    shift_second_derivatives,
)

__all__ = [
    "ParametricCubicSpline",
    "parametric_cubic_spline",
    "parametric_cubic_spline_evaluate",
    "parametric_cubic_spline_fit",
    "shift_second_derivatives",
]
