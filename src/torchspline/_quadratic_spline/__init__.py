from ._quadratic_spline import (
    QuadraticSpline,
    quadratic_spline,
)
from ._quadratic_spline_cases import (
    QuadCase,
    QuadCaseParameters,
    quadratic_spline_case_parameters,
    quadratic_spline_classify,
    quadratic_spline_select,
)
from ._quadratic_spline_evaluate import (
    quadratic_image,
    quadratic_spline_evaluate,
    quadratic_spline_evaluate_at,
)
from ._quadratic_spline_fit import quadratic_spline_fit
from ._quadratic_spline_slopes import quadratic_spline_slopes

__all__ = [
    "QuadCase",
    "QuadCaseParameters",
    "QuadraticSpline",
    "quadratic_image",
    "quadratic_spline",
    "quadratic_spline_case_parameters",
    "quadratic_spline_classify",
    "quadratic_spline_evaluate",
    "quadratic_spline_evaluate_at",
    "quadratic_spline_fit",
    "quadratic_spline_select",
    "quadratic_spline_slopes",
]
