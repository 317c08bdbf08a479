"""Catmull-Rom spline evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._catmull_rom import CatmullRomSpline


def catmull_rom_coefficients(
    window: Tensor,
) -> Tuple[Tensor, Tensor, Tensor, Tensor]:
    """
    Cubic coefficients of the Catmull-Rom segment between P1 and P2.

    Parameters
    ----------
    window : Tensor
        Control points P0, P1, P2, P3, shape (..., 4, *value_shape).

    Returns
    -------
    a, b, c, d : Tensor
        Coefficients, each of shape (..., *value_shape). The segment is
        ``(d + t*(c + t*(b + t*a))) / 2`` for t in [0, 1], passing through
        P1 at t = 0 and P2 at t = 1.
    """
    p0 = window[..., 0, :]
    p1 = window[..., 1, :]
    p2 = window[..., 2, :]
    p3 = window[..., 3, :]

    a = -p0 + 3.0 * p1 - 3.0 * p2 + p3
    b = 2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3
    c = -p0 + p2
    d = 2.0 * p1

    return a, b, c, d


def catmull_rom_evaluate(
    spline: CatmullRomSpline,
    interval: Tensor,
    t: Tensor,
) -> Tensor:
    """
    Evaluate a Catmull-Rom spline at (interval, parameter) pairs.

    Parameters
    ----------
    spline : CatmullRomSpline
        Catmull-Rom spline from catmull_rom_fit
    interval : Tensor
        Index i of the segment from data point i to data point i + 1,
        shape (*query_shape). Must be less than the number of data points.
    t : Tensor
        Local parameter in [0, 1], same shape as ``interval``.

    Returns
    -------
    points : Tensor
        Evaluated points, shape (*query_shape, 2)

    Notes
    -----
    The segment uses the uniform Catmull-Rom basis on the control points
    P0, P1, P2, P3 = data[i-1], data[i], data[i+1], data[i+2], with the
    first and last data points repeated beyond the ends. The tangent at
    each data point is half the difference of its neighbours.

    References
    ----------
    .. [1] Catmull, E. and Rom, R. "A Class of Local Interpolating
           Splines", Computer Aided Geometric Design, 1974.
    """
    control_points = spline.control_points

    interval = torch.as_tensor(interval, device=control_points.device).long()
    t = torch.as_tensor(t, dtype=control_points.dtype, device=control_points.device)

    query_shape = interval.shape
    interval_flat = interval.flatten()
    t_flat = t.flatten().unsqueeze(-1)

    # Window i of the padded control points starts at data point i - 1
    offsets = torch.arange(4, device=control_points.device)
    window = control_points[interval_flat.unsqueeze(-1) + offsets]  # (m, 4, 2)

    a, b, c, d = catmull_rom_coefficients(window)

    result = (d + t_flat * (c + t_flat * (b + t_flat * a))) / 2.0

    return result.view(*query_shape, control_points.shape[-1])
