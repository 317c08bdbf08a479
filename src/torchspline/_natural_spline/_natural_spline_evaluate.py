from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError
from .._locate_interval import locate_intervals
from .._validate import as_query

if TYPE_CHECKING:
    from ._natural_spline import NaturalSpline


def natural_spline_evaluate(
    spline: NaturalSpline,
    t: Tensor,
) -> Tensor:
    """
    Evaluate a natural cubic spline at query points.

    Parameters
    ----------
    spline : NaturalSpline
        Fitted spline from natural_spline_fit
    t : Tensor
        Query points, shape (*query_shape) or scalar. Need not be sorted.

    Returns
    -------
    y : Tensor
        Interpolated values, same shape as ``t``. Query points equal to a
        knot return the knot value exactly. Query points outside the spline
        domain are 0 when spline.extrapolate == 'zero'.

    Raises
    ------
    ExtrapolationError
        If any query point is outside the spline domain and
        spline.extrapolate == 'error'
    """
    knots = spline.knots
    knot_values = spline.knot_values
    coeffs = spline.coefficients

    t = as_query(t, knots)
    query_shape = t.shape
    t_flat = t.flatten()

    t_min = knots[0]
    t_max = knots[-1]

    outside = (t_flat < t_min) | (t_flat > t_max)
    if spline.extrapolate == "error" and torch.any(outside):
        raise ExtrapolationError(
            f"Query points outside spline domain [{t_min.item()}, {t_max.item()}]"
        )

    indices, exact = locate_intervals(knots, t_flat)

    # Interval index for in-range, non-knot queries
    n_segments = coeffs.shape[0]
    segment_idx = torch.clamp(indices, 0, n_segments - 1)

    dx = t_flat - knots[segment_idx]
    b = coeffs[segment_idx, 0]
    c = coeffs[segment_idx, 1]
    d = coeffs[segment_idx, 2]

    # Horner's method: y = y_i + dx*(b + dx*(c + dx*d))
    y = knot_values[segment_idx] + dx * (b + dx * (c + dx * d))

    knot_idx = torch.clamp(indices, 0, knots.shape[0] - 1)
    y = torch.where(exact, knot_values[knot_idx], y)
    y = torch.where(outside, torch.zeros_like(y), y)

    return y.view(query_shape)
