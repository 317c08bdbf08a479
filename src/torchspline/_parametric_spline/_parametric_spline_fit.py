from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Tuple

import torch
from torch import Tensor

from .._knot_error import KnotError
from .._solve_tridiagonal import (
    TridiagonalSystem,
    tridiagonal_decompose,
    tridiagonal_solve,
)
from .._validate import as_points

if TYPE_CHECKING:
    from ._parametric_spline import ParametricCubicSpline

# Right-hand sides above this norm correspond to a cusp sharper than ~90
# degrees and are scaled down.
_CUSP_NORM = 8.5


def _unit_lengths(
    points: Tensor,
    extents: Optional[Sequence[float]],
) -> Tuple[float, float]:
    """Width and height of the extents, floored to float32 epsilon."""
    if extents is None:
        left, right = points[:, 0].min().item(), points[:, 0].max().item()
        top, bottom = points[:, 1].min().item(), points[:, 1].max().item()
    else:
        left, right, top, bottom = (float(value) for value in extents)

    floor = torch.finfo(torch.float32).eps

    return max(right - left, floor), max(bottom - top, floor)


def shift_second_derivatives(solved: Tensor, closed: bool) -> Tensor:
    """
    Align the solved second derivatives with the data points.

    The linear system has no unknown for the first point (and, for open
    contours, the last point). This shifts the solution one slot right and
    fills in the ends.

    Parameters
    ----------
    solved : Tensor
        Second derivatives from the linear system, shape (n, 2).
    closed : bool
        Closed contours have n + 1 points (the last repeats the first), and
        the first point takes the value of the last. Open contours have
        n + 2 points, and each end copies its neighbour so that the third
        derivative vanishes on the first and last interval.

    Returns
    -------
    Tensor
        Second derivative at each data point, shape (n + 1, 2) or (n + 2, 2).
    """
    n = solved.shape[0]
    n_points = n + 1 if closed else n + 2

    shifted = solved.new_zeros((n_points, *solved.shape[1:]))
    shifted[1 : n + 1] = solved

    if closed:
        shifted[0] = shifted[n]
    else:
        shifted[0] = shifted[1]
        shifted[n + 1] = shifted[n]

    return shifted


def parametric_cubic_spline_fit(
    points: Tensor,
    closed: bool = False,
    extents: Optional[Sequence[float]] = None,
) -> ParametricCubicSpline:
    """
    Fit a cubic spline through points parametrized by chord length.

    The curve s(t) = (x(t), y(t)) uses as parameter t the cumulative length
    of the polyline through the points, measured in coordinates normalized
    by the width and height of ``extents``.

    Parameters
    ----------
    points : Tensor
        Points, shape (n_points, 2), n_points >= 3. For closed contours the
        last point must repeat the first; this is not checked.
    closed : bool
        Whether the curve is a closed contour.
    extents : sequence of float, optional
        ``(left, right, top, bottom)`` of the region used as unit square.
        Defaults to the bounding box of ``points``. Degenerate widths are
        floored to float32 machine epsilon.

    Returns
    -------
    ParametricCubicSpline
        Fitted spline.

    Raises
    ------
    KnotError
        If there are fewer than 3 points or two consecutive points coincide.
    SingularSystemError
        If the spline system is not positive definite.

    Notes
    -----
    The system for the second derivatives M at the interior points is::

        t[i]*M[i-1] + 2*(t[i] + t[i+1])*M[i] + t[i+1]*M[i+1]
            = 6*(u[i+1] - u[i])

    with t[i] the length and u[i] the unit direction of chord i. It is
    cyclic for closed contours. For open contours the third derivative is
    zero on the first and last interval. Right-hand sides whose normalized
    norm exceeds 8.5 (a cusp of more than 90 degrees) are scaled down to
    norm 8.5 to avoid oscillation; the first derivative is then not
    continuous there.
    """
    points = as_points(points)
    n_points = points.shape[0]

    if n_points < 3:
        raise KnotError(f"Need at least 3 points, got {n_points}")

    unit_x, unit_y = _unit_lengths(points, extents)
    unit = torch.tensor([unit_x, unit_y], dtype=points.dtype, device=points.device)

    chords = points[1:] - points[:-1]  # (n_points-1, 2)
    chord_lengths = torch.linalg.vector_norm(chords / unit, dim=-1)

    if not torch.all(chord_lengths > 0):
        raise KnotError("Consecutive points must be distinct")

    # One slot per point; the last holds the wrap-around chord when closed
    lengths = points.new_zeros(n_points)
    lengths[:-1] = chord_lengths
    directions = points.new_zeros((n_points, 2))
    directions[:-1] = chords / chord_lengths.unsqueeze(-1)

    n = n_points - 2
    if closed:
        lengths[-1] = lengths[0]
        directions[-1] = directions[0]
        n += 1

    lower = lengths[:n].clone()
    diag = 2.0 * (lengths[:n] + lengths[1 : n + 1])
    upper = lengths[1 : n + 1].clone()

    rhs = 6.0 * (directions[1 : n + 1] - directions[:n])  # (n, 2)

    norm = torch.linalg.vector_norm(rhs / unit, dim=-1) / _CUSP_NORM
    rhs = torch.where((norm > 1.0).unsqueeze(-1), rhs / norm.unsqueeze(-1), rhs)

    if not closed:
        # Zero third derivative at both ends
        diag[0] += lower[0]
        lower[0] = 0.0
        diag[n - 1] += upper[n - 1]
        upper[n - 1] = 0.0

    system = TridiagonalSystem(
        lower=lower,
        diag=diag,
        upper=upper,
        cyclic=closed,
        batch_size=[],
    )

    solved = tridiagonal_solve(tridiagonal_decompose(system), rhs)

    from ._parametric_spline import ParametricCubicSpline

    return ParametricCubicSpline(
        points=points,
        lengths=lengths,
        second_derivatives=shift_second_derivatives(solved, closed),
        closed=closed,
        batch_size=[],
    )
