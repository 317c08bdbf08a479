"""Catmull-Rom spline representation and convenience function."""

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._validate import as_points
from ._catmull_rom_evaluate import catmull_rom_evaluate


@tensorclass
class CatmullRomSpline:
    """Uniform Catmull-Rom spline through a sequence of points.

    The spline passes through every data point. Segment i runs from data
    point i to data point i + 1 and only depends on the four data points
    around it, so no global system has to be solved.

    Attributes
    ----------
    control_points : Tensor
        Data points padded by repeating the first point once in front and
        the last point twice behind, shape (n + 3, 2) for n data points.
        The padding makes the first and last data points interpolated too.
    """

    control_points: Tensor


def catmull_rom_fit(points: Tensor) -> CatmullRomSpline:
    """
    Build a Catmull-Rom spline through data points.

    Parameters
    ----------
    points : Tensor
        Data points, shape (n, 2), n >= 1.

    Returns
    -------
    CatmullRomSpline
    """
    points = as_points(points)

    if points.shape[0] < 1:
        raise ValueError("Catmull-Rom spline requires at least 1 point")

    control_points = torch.cat(
        [points[:1], points, points[-1:], points[-1:]], dim=0
    )

    return CatmullRomSpline(control_points=control_points, batch_size=[])


def catmull_rom_spline(
    points: Tensor,
    interval: Tensor,
    t: Tensor,
) -> Tensor:
    """Evaluate a Catmull-Rom spline through points at (interval, t) pairs.

    This is meant for callers that have already mapped every output sample
    (for instance one per destination pixel) to a segment and a position
    within it.

    Parameters
    ----------
    points : Tensor
        Data points, shape (n, 2).
    interval : Tensor
        Segment index of each query, shape (m,), each less than n.
        Out-of-range indices are not checked beyond torch's own indexing.
    t : Tensor
        Position within the segment, in [0, 1], shape (m,).

    Returns
    -------
    Tensor
        One point per query, shape (m, 2).

    Examples
    --------
    >>> import torch
    >>> points = torch.tensor([[0., 0.], [1., 1.], [2., 1.], [3., 0.]])
    >>> catmull_rom_spline(points, torch.tensor([1, 1]), torch.tensor([0.0, 1.0]))
    """
    spline = catmull_rom_fit(points)
    return catmull_rom_evaluate(spline, interval, t)
