"""Cubic splines through space curves parametrized by arc length."""

from typing import Optional, Sequence

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._parametric_spline_evaluate import parametric_cubic_spline_evaluate
from ._parametric_spline_fit import parametric_cubic_spline_fit


@tensorclass
class ParametricCubicSpline:
    """Cubic spline s(t) = (x(t), y(t)) with t the chord length.

    Attributes
    ----------
    points : Tensor
        Data points, shape (n_points, 2). For closed contours the last
        point repeats the first.
    lengths : Tensor
        Normalized chord length of each interval, shape (n_points,). The
        last slot is the wrap-around chord of a closed contour and is
        otherwise 0.
    second_derivatives : Tensor
        Second derivatives of x and y with respect to t at each data point,
        shape (n_points, 2).
    closed : bool
        Whether the curve is a closed contour.
    """

    points: Tensor
    lengths: Tensor
    second_derivatives: Tensor
    closed: bool


def parametric_cubic_spline(
    points: Tensor,
    closed: bool = False,
    sample_count: int = 100,
    extents: Optional[Sequence[float]] = None,
) -> Tensor:
    """Resample a curve through points with an arc-length cubic spline.

    Unlike :func:`natural_spline`, the points need not be sorted by x; the
    curve may loop back on itself.

    Parameters
    ----------
    points : Tensor
        Points, shape (n_points, 2), n_points >= 3. For ``closed=True`` the
        first point must be repeated as the last point.
    closed : bool, optional
        Whether the curve is a closed contour. Default is False.
    sample_count : int, optional
        Number of output points. Default is 100.
    extents : sequence of float, optional
        ``(left, right, top, bottom)`` used to normalize chord lengths.
        Defaults to the bounding box of ``points``.

    Returns
    -------
    Tensor
        ``sample_count`` points equally spaced in arc length, shape
        (sample_count, 2).

    Examples
    --------
    >>> import torch
    >>> square = torch.tensor([[0., 0.], [1., 0.], [1., 1.], [0., 1.], [0., 0.]])
    >>> parametric_cubic_spline(square, closed=True, sample_count=32)
    """
    spline = parametric_cubic_spline_fit(points, closed=closed, extents=extents)

    return parametric_cubic_spline_evaluate(spline, sample_count)
