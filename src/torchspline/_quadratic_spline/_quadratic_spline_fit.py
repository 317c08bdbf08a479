from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import torch
from torch import Tensor

from .._validate import as_points, check_extrapolate, check_knots
from ._quadratic_spline_slopes import quadratic_spline_slopes

if TYPE_CHECKING:
    from ._quadratic_spline import QuadraticSpline


def quadratic_spline_fit(
    points: Tensor,
    slopes: Optional[Tensor] = None,
    epsilon: float = 0.0,
    extrapolate: str = "extrapolate",
) -> QuadraticSpline:
    """
    Fit a shape-preserving osculatory quadratic spline to data points.

    Parameters
    ----------
    points : Tensor
        Data points, shape (n_points, 2), with strictly increasing x.
    slopes : Tensor, optional
        First derivative at each data point, shape (n_points,). By default
        computed with :func:`quadratic_spline_slopes`, which preserves
        monotonicity and convexity of the data.
    epsilon : float
        Relative tolerance for the knot placement decision. 0.0 uses exact
        comparisons.
    extrapolate : str
        Extrapolation mode: "extrapolate", "warn", "error".

    Returns
    -------
    QuadraticSpline
        Fitted spline.

    Raises
    ------
    KnotError
        If x is not strictly increasing or has fewer than 3 points.
    """
    points = as_points(points)
    check_extrapolate(extrapolate, ("extrapolate", "warn", "error"))

    if epsilon < 0.0:
        raise ValueError(f"epsilon must be non-negative, got {epsilon}")

    x = points[:, 0].contiguous()
    y = points[:, 1].contiguous()

    check_knots(x, strict=True)

    if slopes is None:
        slopes = quadratic_spline_slopes(x, y)
    else:
        slopes = torch.as_tensor(slopes, dtype=y.dtype, device=y.device)
        if slopes.shape != y.shape:
            raise ValueError(
                f"Expected slopes of shape {tuple(y.shape)}, "
                f"got {tuple(slopes.shape)}"
            )

    from ._quadratic_spline import QuadraticSpline

    return QuadraticSpline(
        knots=x,
        knot_values=y,
        slopes=slopes,
        epsilon=float(epsilon),
        extrapolate=extrapolate,
        batch_size=[],
    )
