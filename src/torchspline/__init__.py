"""torchspline: curve interpolation for PyTorch tensors.

This package fits interpolating splines through 2-D point sequences and
resamples them.

Convenience Functions
---------------------
natural_spline
    Interpolate sorted points with a natural cubic spline.
quadratic_spline
    Interpolate sorted points with a shape-preserving quadratic spline.
parametric_cubic_spline
    Resample an open or closed curve with an arc-length cubic spline.
catmull_rom_spline
    Evaluate a Catmull-Rom spline at (interval, parameter) pairs.
spline_interpolate
    Interpolate sampled ordinates with a named method.

Natural Cubic Splines
---------------------
natural_spline_fit
    Fit a natural cubic spline to data points.
natural_spline_evaluate
    Evaluate a natural cubic spline at query points.
natural_spline_system
    Assemble the tridiagonal system of a natural cubic spline.

Quadratic Splines
-----------------
quadratic_spline_fit
    Fit a shape-preserving quadratic spline to data points.
quadratic_spline_evaluate
    Evaluate a quadratic spline at non-decreasing query points.
quadratic_spline_slopes
    Estimate first derivatives at the data points.
quadratic_spline_select
    Classify an interval and compute its knot parameters.

Parametric Cubic Splines
------------------------
parametric_cubic_spline_fit
    Fit a cubic spline parametrized by chord length.
parametric_cubic_spline_evaluate
    Sample a parametric spline at equally spaced arc lengths.

Catmull-Rom Splines
-------------------
catmull_rom_fit
    Pad data points into Catmull-Rom control points.
catmull_rom_evaluate
    Evaluate a Catmull-Rom spline.

Linear Algebra
--------------
tridiagonal_decompose
    Factor a symmetric, optionally cyclic, tridiagonal matrix.
tridiagonal_solve
    Solve with a factored tridiagonal matrix in place.
solve_tridiagonal
    Factor and solve in one step.
locate_interval
    Binary search of a key in sorted abscissas.

Data Types
----------
NaturalSpline
    Natural cubic spline coefficients.
QuadraticSpline
    Quadratic spline data and slopes.
ParametricCubicSpline
    Arc-length cubic spline through a curve.
CatmullRomSpline
    Padded Catmull-Rom control points.
TridiagonalSystem
    Symmetric tridiagonal matrix.
TridiagonalFactor
    Factorization of a TridiagonalSystem.

Exceptions
----------
SplineError
    Base exception for spline operations.
QueryOrderError
    Query abscissas are not sorted.
KnotError
    Invalid data points.
SingularSystemError
    Tridiagonal system is not positive definite.
ExtrapolationError
    Query point outside spline domain.
ExtrapolationWarning
    Query point outside spline domain was extrapolated.
"""

from ._catmull_rom import (
    CatmullRomSpline,
    catmull_rom_coefficients,
    catmull_rom_evaluate,
    catmull_rom_fit,
    catmull_rom_spline,
)
from ._extrapolation_error import ExtrapolationError, ExtrapolationWarning
from ._knot_error import KnotError
from ._locate_interval import locate_interval, locate_intervals
from ._natural_spline import (
    NaturalSpline,
    natural_spline,
    natural_spline_evaluate,
    natural_spline_fit,
    natural_spline_system,
)
from ._parametric_spline import (
    ParametricCubicSpline,
    parametric_cubic_spline,
    parametric_cubic_spline_evaluate,
    parametric_cubic_spline_fit,
    shift_second_derivatives,
)
from ._quadratic_spline import (
    QuadCase,
    QuadCaseParameters,
    QuadraticSpline,
    quadratic_image,
    quadratic_spline,
    quadratic_spline_case_parameters,
    quadratic_spline_classify,
    quadratic_spline_evaluate,
    quadratic_spline_evaluate_at,
    quadratic_spline_fit,
    quadratic_spline_select,
    quadratic_spline_slopes,
)
from ._query_order_error import QueryOrderError
from ._singular_system_error import SingularSystemError
from ._solve_tridiagonal import (
    TridiagonalFactor,
    TridiagonalSystem,
    solve_tridiagonal,
    tridiagonal_decompose,
    tridiagonal_solve,
)
from ._spline_error import SplineError
from ._spline_interpolate import spline_interpolate

__all__ = [
    "CatmullRomSpline",
    "ExtrapolationError",
    "ExtrapolationWarning",
    "KnotError",
    "NaturalSpline",
    "ParametricCubicSpline",
    "QuadCase",
    "QuadCaseParameters",
    "QuadraticSpline",
    "QueryOrderError",
    "SingularSystemError",
    "SplineError",
    "TridiagonalFactor",
    "TridiagonalSystem",
    "catmull_rom_coefficients",
    "catmull_rom_evaluate",
    "catmull_rom_fit",
    "catmull_rom_spline",
    "locate_interval",
    "locate_intervals",
    "natural_spline",
    "natural_spline_evaluate",
    "natural_spline_fit",
    "natural_spline_system",
    "parametric_cubic_spline",
    "parametric_cubic_spline_evaluate",
    "parametric_cubic_spline_fit",
    "quadratic_image",
    "quadratic_spline",
    "quadratic_spline_case_parameters",
    "quadratic_spline_classify",
    "quadratic_spline_evaluate",
    "quadratic_spline_evaluate_at",
    "quadratic_spline_fit",
    "quadratic_spline_select",
    "quadratic_spline_slopes",
    "shift_second_derivatives",
    "solve_tridiagonal",
    "spline_interpolate",
    "tridiagonal_decompose",
    "tridiagonal_solve",
]

__version__ = "0.1.0"
