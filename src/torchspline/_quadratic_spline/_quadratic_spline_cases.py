"""Knot placement for one interval of a shape-preserving quadratic spline."""

import enum
import math
from typing import NamedTuple, Tuple

Point = Tuple[float, float]


class QuadCase(enum.IntEnum):
    """Number and placement of the knots inside an interval.

    - ``ONE``: one knot where the two tangent lines intersect.
    - ``TWO``: one knot at the interval midpoint.
    - ``THREE``: one knot placed on the side of the steeper tangent.
    - ``FOUR``: two knots, when neither tangent line crosses the midline.
    """

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


class QuadCaseParameters(NamedTuple):
    """Knots and auxiliary points of the spline on one interval.

    (v1, v2) and (w1, w2) are points on the tangent lines at the left and
    right end of the interval, (z1, z2) is a knot. Cases ``ONE`` to
    ``THREE`` use only these. Case ``FOUR`` adds the knot (y1, y2) and
    the midpoint (e1, e2) between its two knots. Unused fields are NaN.
    """

    e1: float = math.nan
    e2: float = math.nan
    v1: float = math.nan
    v2: float = math.nan
    w1: float = math.nan
    w2: float = math.nan
    z1: float = math.nan
    z2: float = math.nan
    y1: float = math.nan
    y2: float = math.nan


def quadratic_spline_classify(
    p: Point,
    q: Point,
    m1: float,
    m2: float,
    epsilon: float = 0.0,
) -> QuadCase:
    """
    Choose the knot placement for the interval PQ.

    Parameters
    ----------
    p, q : tuple of float
        End points (x, y) of the interval.
    m1, m2 : float
        Slopes of the spline at P and Q.
    epsilon : float
        Relative tolerance used to decide whether m1 or m2 is close to the
        chord slope or to twice the chord slope. Roundoff in such cases
        may otherwise flip convexity or monotonicity. When non-zero it
        should be at least machine epsilon.

    Returns
    -------
    QuadCase
    """
    slope = (q[1] - p[1]) / (q[0] - p[0])

    if slope == 0.0:
        return QuadCase.TWO if m1 * m2 >= 0.0 else QuadCase.ONE

    prod1 = slope * m1
    prod2 = slope * m2

    mref = abs(slope)
    mref1 = abs(m1)
    mref2 = abs(m2)

    relerr = epsilon * mref

    if (
        abs(slope - m1) > relerr
        and abs(slope - m2) > relerr
        and prod1 >= 0.0
        and prod2 >= 0.0
    ):
        if (mref - mref1) * (mref - mref2) < 0.0:
            # The tangent lines at P and Q intersect between the two
            # abscissas; the intersection is the knot.
            return QuadCase.ONE
        if mref1 > mref * 2.0:
            if mref2 <= (2.0 - epsilon) * mref:
                return QuadCase.THREE
        elif mref2 <= mref * 2.0:
            # Both tangent lines cross the vertical midline of the box
            # spanned by P and Q.
            return QuadCase.TWO
        elif mref1 <= (2.0 - epsilon) * mref:
            # Exactly one tangent line crosses the midline.
            return QuadCase.THREE
        # Neither tangent line crosses the midline.
        return QuadCase.FOUR

    # At least one of m1, m2 disagrees in sign with the chord.
    if prod1 < 0.0 and prod2 < 0.0:
        return QuadCase.TWO
    if prod1 < 0.0:
        if mref2 > (epsilon + 1.0) * mref:
            return QuadCase.ONE
        return QuadCase.TWO
    if mref1 > (epsilon + 1.0) * mref:
        return QuadCase.ONE
    return QuadCase.TWO


def quadratic_spline_case_parameters(
    p: Point,
    q: Point,
    m1: float,
    m2: float,
    case: QuadCase,
) -> QuadCaseParameters:
    """
    Compute the knots and auxiliary points of the spline on PQ.

    Parameters
    ----------
    p, q : tuple of float
        End points (x, y) of the interval.
    m1, m2 : float
        Slopes of the spline at P and Q.
    case : QuadCase
        Knot placement from :func:`quadratic_spline_classify`.

    Returns
    -------
    QuadCaseParameters
    """
    px, py = p
    qx, qy = q

    if case == QuadCase.ONE:
        z1 = (py - qy + m2 * qx - m1 * px) / (m2 - m1)
        ztwo = py + m1 * (z1 - px)
        v1 = (px + z1) / 2.0
        v2 = (py + ztwo) / 2.0
        w1 = (z1 + qx) / 2.0
        w2 = (ztwo + qy) / 2.0
        z2 = v2 + (w2 - v2) / (w1 - v1) * (z1 - v1)
        return QuadCaseParameters(v1=v1, v2=v2, w1=w1, w2=w2, z1=z1, z2=z2)

    if case == QuadCase.TWO:
        z1 = (px + qx) / 2.0
        v1 = (px + z1) / 2.0
        v2 = py + m1 * (v1 - px)
        w1 = (z1 + qx) / 2.0
        w2 = qy + m2 * (w1 - qx)
        z2 = (v2 + w2) / 2.0
        return QuadCaseParameters(v1=v1, v2=v2, w1=w1, w2=w2, z1=z1, z2=z2)

    # Where the tangent lines at P and Q reach the ordinate of the other end
    c1 = px + (qy - py) / m1
    d1 = qx + (py - qy) / m2

    if case == QuadCase.FOUR:
        y1 = (px + c1) / 2.0
        v1 = (px + y1) / 2.0
        v2 = m1 * (v1 - px) + py
        z1 = (d1 + qx) / 2.0
        w1 = (qx + z1) / 2.0
        w2 = m2 * (w1 - qx) + qy
        mbar3 = (w2 - v2) / (w1 - v1)
        y2 = mbar3 * (y1 - v1) + v2
        z2 = mbar3 * (z1 - v1) + v2
        e1 = (y1 + z1) / 2.0
        e2 = mbar3 * (e1 - v1) + v2
        return QuadCaseParameters(
            e1=e1, e2=e2, v1=v1, v2=v2, w1=w1, w2=w2, z1=z1, z2=z2, y1=y1, y2=y2
        )

    h1 = c1 * 2.0 - px
    j1 = d1 * 2.0 - qx
    mbar1 = (qy - py) / (h1 - px)
    mbar2 = (py - qy) / (j1 - qx)

    k1 = (py - qy + qx * mbar2 - px * mbar1) / (mbar2 - mbar1)
    if abs(m1) > abs(m2):
        z1 = (k1 + px) / 2.0
    else:
        z1 = (k1 + qx) / 2.0
    v1 = (px + z1) / 2.0
    v2 = py + m1 * (v1 - px)
    w1 = (qx + z1) / 2.0
    w2 = qy + m2 * (w1 - qx)
    z2 = v2 + (w2 - v2) / (w1 - v1) * (z1 - v1)
    return QuadCaseParameters(v1=v1, v2=v2, w1=w1, w2=w2, z1=z1, z2=z2)


def quadratic_spline_select(
    p: Point,
    q: Point,
    m1: float,
    m2: float,
    epsilon: float = 0.0,
) -> Tuple[QuadCase, QuadCaseParameters]:
    """Classify the interval PQ and compute its parameters."""
    case = quadratic_spline_classify(p, q, m1, m2, epsilon)
    return case, quadratic_spline_case_parameters(p, q, m1, m2, case)
