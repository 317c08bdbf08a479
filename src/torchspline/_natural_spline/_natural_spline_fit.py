from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import torch
from torch import Tensor

from .._solve_tridiagonal import (
    TridiagonalSystem,
    tridiagonal_decompose,
    tridiagonal_solve,
)
from .._validate import as_points, check_extrapolate, check_knots

if TYPE_CHECKING:
    from ._natural_spline import NaturalSpline


def natural_spline_system(
    points: Tensor,
) -> Tuple[TridiagonalSystem, Tensor]:
    """
    Linear system for the half second derivatives of a natural spline.

    Parameters
    ----------
    points : Tensor
        Data points, shape (n_points, 2), with non-decreasing x.

    Returns
    -------
    system : TridiagonalSystem
        Symmetric system with n_points rows.
    rhs : Tensor
        Right-hand side, shape (n_points,).

    Raises
    ------
    KnotError
        If x decreases anywhere or there are fewer than 3 points.

    Notes
    -----
    With interval widths h[i] = x[i+1] - x[i] and chord slopes
    delta[i] = (y[i+1] - y[i]) / h[i], interior row j reads::

        h[j-1]*c[j-1] + 2*(h[j-1] + h[j])*c[j] + h[j]*c[j+1]
            = 3*(delta[j] - delta[j-1])

    The first and last rows are identity rows with a zero right-hand side,
    pinning c[0] = c[n-1] = 0. The couplings of rows 1 and n-2 to the
    pinned unknowns are dropped, which keeps the matrix symmetric and
    leaves the solution unchanged.
    """
    points = as_points(points)
    x = points[:, 0].contiguous()
    y = points[:, 1].contiguous()

    check_knots(x, strict=False)

    n = x.shape[0]
    h = x[1:] - x[:-1]  # (n-1,)
    delta = (y[1:] - y[:-1]) / h  # (n-1,)

    diag = torch.ones(n, dtype=x.dtype, device=x.device)
    upper = torch.zeros(n, dtype=x.dtype, device=x.device)
    lower = torch.zeros(n, dtype=x.dtype, device=x.device)
    rhs = torch.zeros(n, dtype=y.dtype, device=y.device)

    # Interior rows 1..n-2
    diag[1:-1] = 2 * (h[:-1] + h[1:])
    upper[1:-2] = h[1:-1]
    lower[2:-1] = h[1:-1]
    rhs[1:-1] = 3 * (delta[1:] - delta[:-1])

    system = TridiagonalSystem(
        lower=lower,
        diag=diag,
        upper=upper,
        cyclic=False,
        batch_size=[],
    )

    return system, rhs


def natural_spline_fit(
    points: Tensor,
    extrapolate: str = "zero",
) -> NaturalSpline:
    """
    Fit a natural cubic spline to data points.

    Parameters
    ----------
    points : Tensor
        Data points, shape (n_points, 2), with non-decreasing x. Repeated
        abscissas are accepted but yield non-finite coefficients.
    extrapolate : str
        Extrapolation mode: "zero", "error".

    Returns
    -------
    NaturalSpline
        Fitted spline.

    Raises
    ------
    KnotError
        If x decreases anywhere or there are fewer than 3 points.
    SingularSystemError
        If the spline system is not positive definite.

    References
    ----------
    Burden, R. L., Faires, J. D. and Reynolds, A. C. (1981). "Numerical
    Analysis". Prindle, Weber & Schmidt. p. 112.
    """
    check_extrapolate(extrapolate, ("zero", "error"))

    points = as_points(points)
    x = points[:, 0].contiguous()
    y = points[:, 1].contiguous()

    system, rhs = natural_spline_system(points)

    # Solved in place: rhs now holds c
    c = tridiagonal_solve(tridiagonal_decompose(system), rhs)

    # y(t) = y[i] + b[i]*t + c[i]*t^2 + d[i]*t^3, t = x - x[i]
    h = x[1:] - x[:-1]
    delta = (y[1:] - y[:-1]) / h
    b = delta - h * (c[1:] + 2.0 * c[:-1]) / 3.0
    d = (c[1:] - c[:-1]) / (3.0 * h)

    coeffs = torch.stack([b, c[:-1], d], dim=-1)  # (n-1, 3)

    from ._natural_spline import NaturalSpline

    return NaturalSpline(
        knots=x,
        knot_values=y,
        coefficients=coeffs,
        extrapolate=extrapolate,
        batch_size=[],
    )
