from ._natural_spline import (
    NaturalSpline,
    natural_spline,
)
from ._natural_spline_evaluate import natural_spline_evaluate
from ._natural_spline_fit import natural_spline_fit, natural_spline_system

__all__ = [
    "NaturalSpline",
    "natural_spline",
    "natural_spline_evaluate",
    "natural_spline_fit",
    "natural_spline_system",
]
