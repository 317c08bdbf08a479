"""Shape-preserving quadratic spline interpolation."""

from typing import Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._validate import as_query
from ._quadratic_spline_evaluate import _quadratic_spline_evaluate
from ._quadratic_spline_fit import quadratic_spline_fit


@tensorclass
class QuadraticSpline:
    """Osculatory quadratic spline through a set of data points.

    Between two data points the spline consists of two or three quadratic
    pieces joined with continuous slope at one or two internal knots. The
    knots are placed so that no spurious inflections or extrema appear.

    Attributes
    ----------
    knots : Tensor
        Data abscissas, shape (n_points,). Strictly increasing.
    knot_values : Tensor
        Data ordinates, shape (n_points,).
    slopes : Tensor
        First derivative at each data point, shape (n_points,).
    epsilon : float
        Relative tolerance of the knot placement decision.
    extrapolate : str
        Extrapolation mode: "extrapolate", "warn", "error".
    """

    knots: Tensor
    knot_values: Tensor
    slopes: Tensor
    epsilon: float
    extrapolate: str


def quadratic_spline(
    points: Tensor,
    query: Tensor,
    slopes: Optional[Tensor] = None,
    epsilon: float = 0.0,
    extrapolate: str = "extrapolate",
) -> Tensor:
    """Interpolate data points with a shape-preserving quadratic spline.

    Parameters
    ----------
    points : Tensor
        Data points, shape (n_points, 2), sorted by strictly increasing x.
        At least 3 points.
    query : Tensor
        Abscissas to evaluate, shape (n_query,), non-decreasing.
    slopes : Tensor, optional
        First derivatives at the data points. See :func:`quadratic_spline_fit`.
    epsilon : float, optional
        Relative tolerance of the knot placement decision. Default is 0.0.
    extrapolate : str, optional
        How to handle queries outside the data range. One of:

        - ``"extrapolate"``: Continue the boundary pieces (default).
        - ``"warn"``: As ``"extrapolate"``, emitting ExtrapolationWarning.
        - ``"error"``: Raise ExtrapolationError.

    Returns
    -------
    Tensor
        Interpolated points, shape (n_query, 2).

    Raises
    ------
    QueryOrderError
        If ``query`` is not non-decreasing.

    Examples
    --------
    >>> import torch
    >>> points = torch.tensor([[0., 0.], [1., 1.], [2., 4.], [3., 9.]])
    >>> quadratic_spline(points, torch.tensor([0.5, 1.0, 2.5]))
    """
    spline = quadratic_spline_fit(
        points, slopes=slopes, epsilon=epsilon, extrapolate=extrapolate
    )
    query = as_query(query, spline.knots).flatten()

    y = _quadratic_spline_evaluate(spline, query, stacklevel=3)

    return torch.stack([query, y], dim=-1)
