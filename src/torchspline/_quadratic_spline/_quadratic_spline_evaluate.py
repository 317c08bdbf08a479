"""Shape-preserving quadratic spline evaluation."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Optional, Tuple

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError, ExtrapolationWarning
from .._locate_interval import locate_interval
from .._query_order_error import QueryOrderError
from .._validate import as_query
from ._quadratic_spline_cases import (
    QuadCase,
    QuadCaseParameters,
    quadratic_spline_select,
)

if TYPE_CHECKING:
    from ._quadratic_spline import QuadraticSpline

Point = Tuple[float, float]


def quadratic_image(
    p1: float,
    p2: float,
    p3: float,
    x1: float,
    x2: float,
    x3: float,
) -> float:
    """
    Value at x2 of the quadratic piece with control ordinates p1, p2, p3.

    The piece runs between the abscissas x3 and x1, where it takes the
    values p1 and p3 respectively; p2 is the ordinate of the intersection
    of its end tangents (a quadratic Bezier control point). A piece of
    zero width evaluates to p1 everywhere.
    """
    a = x1 - x2
    b = x2 - x3
    c = x1 - x3

    if c == 0.0:
        # The piece has collapsed to the point (x3, p1)
        return p1

    return (p1 * (a * a) + p2 * 2.0 * b * a + p3 * (b * b)) / (c * c)


def quadratic_spline_evaluate_at(
    x: float,
    left: Point,
    right: Point,
    params: QuadCaseParameters,
    case: QuadCase,
) -> float:
    """
    Evaluate the spline on one interval.

    Parameters
    ----------
    x : float
        Abscissa to evaluate. May lie outside [left[0], right[0]] when
        extrapolating from a boundary interval.
    left, right : tuple of float
        Data points (x, y) bounding the interval.
    params : QuadCaseParameters
        Knots of the interval.
    case : QuadCase
        Knot placement used to compute ``params``.

    Returns
    -------
    float
    """
    if case == QuadCase.FOUR:
        # Two knots, y1 < z1
        if params.y1 > x:
            return quadratic_image(
                left[1], params.v2, params.y2, params.y1, x, left[0]
            )
        if params.y1 == x:
            return params.y2
        if params.z1 > x:
            return quadratic_image(
                params.y2, params.e2, params.z2, params.z1, x, params.y1
            )
        if params.z1 == x:
            return params.z2
        return quadratic_image(
            params.z2, params.w2, right[1], right[0], x, params.z1
        )

    if params.z1 < x:
        return quadratic_image(
            params.z2, params.w2, right[1], right[0], x, params.z1
        )
    if params.z1 > x:
        return quadratic_image(
            left[1], params.v2, params.z2, params.z1, x, left[0]
        )
    return params.z2


def quadratic_spline_evaluate(
    spline: QuadraticSpline,
    t: Tensor,
) -> Tensor:
    """
    Evaluate a shape-preserving quadratic spline at query points.

    Parameters
    ----------
    spline : QuadraticSpline
        Fitted spline from quadratic_spline_fit.
    t : Tensor
        Query abscissas, shape (*query_shape) or scalar. Must be
        non-decreasing in flattened order.

    Returns
    -------
    y : Tensor
        Interpolated values, same shape as ``t``.

    Raises
    ------
    QueryOrderError
        If the query abscissas are not non-decreasing.
    ExtrapolationError
        If any query point is outside the spline domain and
        spline.extrapolate == 'error'.

    Notes
    -----
    The queries are walked from left to right; the knots of an interval are
    computed when the walk enters it. Queries equal to a data abscissa
    return the data ordinate exactly. Queries below the first (above the
    last) abscissa are evaluated with the first (last) interval's pieces.
    """
    return _quadratic_spline_evaluate(spline, t, stacklevel=3)


def _quadratic_spline_evaluate(
    spline: QuadraticSpline,
    t: Tensor,
    stacklevel: int,
) -> Tensor:
    """Evaluate with ExtrapolationWarning attributed ``stacklevel`` frames up."""
    t = as_query(t, spline.knots)
    xq = t.flatten().tolist()

    for j in range(1, len(xq)):
        if xq[j] < xq[j - 1]:
            raise QueryOrderError(
                f"Query abscissas must be non-decreasing, but "
                f"t[{j}] = {xq[j]} < t[{j - 1}] = {xq[j - 1]}"
            )

    x = spline.knots.tolist()
    y = spline.knot_values.tolist()
    m = spline.slopes.tolist()
    epsilon = spline.epsilon
    last = len(x) - 1

    n_outside = sum(1 for value in xq if value < x[0] or value > x[last])
    if n_outside:
        if spline.extrapolate == "error":
            raise ExtrapolationError(
                f"Query points outside spline domain [{x[0]}, {x[last]}]"
            )
        if spline.extrapolate == "warn":
            warnings.warn(
                f"{n_outside} query point(s) outside spline domain "
                f"[{x[0]}, {x[last]}] were extrapolated.",
                ExtrapolationWarning,
                stacklevel=stacklevel,
            )

    result = []

    active: Optional[int] = None
    case = QuadCase.ONE
    params = QuadCaseParameters()

    # Largest i with x[i] <= query, for in-range queries
    cursor: Optional[int] = None

    for value in xq:
        if value < x[0]:
            interval = 0
        elif value > x[last]:
            interval = last - 1
        else:
            if cursor is None:
                cursor, _ = locate_interval(x, value)
            while cursor < last and x[cursor + 1] <= value:
                cursor += 1

            if x[cursor] == value:
                result.append(y[cursor])
                continue
            interval = cursor

        if interval != active:
            case, params = quadratic_spline_select(
                (x[interval], y[interval]),
                (x[interval + 1], y[interval + 1]),
                m[interval],
                m[interval + 1],
                epsilon,
            )
            active = interval

        result.append(
            quadratic_spline_evaluate_at(
                value,
                (x[interval], y[interval]),
                (x[interval + 1], y[interval + 1]),
                params,
                case,
            )
        )

    return torch.tensor(result, dtype=t.dtype, device=t.device).view(t.shape)
