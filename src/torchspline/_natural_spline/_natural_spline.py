"""Natural cubic spline interpolation."""

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._validate import as_query
from ._natural_spline_evaluate import natural_spline_evaluate
from ._natural_spline_fit import natural_spline_fit


@tensorclass
class NaturalSpline:
    """Piecewise cubic interpolant with zero curvature at the end points.

    Attributes
    ----------
    knots : Tensor
        Breakpoints, shape (n_knots,). Non-decreasing.
    knot_values : Tensor
        Values at the breakpoints, shape (n_knots,).
    coefficients : Tensor
        Polynomial coefficients, shape (n_segments, 3).
        For segment i, the polynomial is:
        knot_values[i] + b[i]*(t-knots[i]) + c[i]*(t-knots[i])^2 + d[i]*(t-knots[i])^3
        where coefficients[i] = [b, c, d].
    extrapolate : str
        Extrapolation mode: "zero", "error".
    """

    knots: Tensor
    knot_values: Tensor
    coefficients: Tensor
    extrapolate: str


def natural_spline(
    points: Tensor,
    query: Tensor,
    extrapolate: str = "zero",
) -> Tensor:
    """Interpolate data points with a natural cubic spline.

    Parameters
    ----------
    points : Tensor
        Data points, shape (n_points, 2), sorted by x. At least 3 points.
    query : Tensor
        Abscissas to evaluate, shape (n_query,).
    extrapolate : str, optional
        How to handle queries outside the data range. One of:

        - ``"zero"``: Return 0 (default).
        - ``"error"``: Raise ExtrapolationError.

    Returns
    -------
    Tensor
        Interpolated points, shape (n_query, 2).

    Raises
    ------
    KnotError
        If the abscissas of ``points`` decrease anywhere.

    Examples
    --------
    >>> import torch
    >>> points = torch.tensor([[0., 0.], [1., 1.], [2., 0.]])
    >>> natural_spline(points, torch.tensor([0.5, 1.0, 1.5]))
    """
    spline = natural_spline_fit(points, extrapolate=extrapolate)
    query = as_query(query, spline.knots).flatten()

    return torch.stack([query, natural_spline_evaluate(spline, query)], dim=-1)
