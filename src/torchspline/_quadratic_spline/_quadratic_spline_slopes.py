import torch
from torch import Tensor


def quadratic_spline_slopes(knots: Tensor, values: Tensor) -> Tensor:
    """
    Slopes at the data points for a shape-preserving quadratic spline.

    The slopes guarantee that an osculatory quadratic spline needs only one
    additional knot between two adjacent data points, and preserve
    monotonicity and convexity wherever the data allow it.

    Parameters
    ----------
    knots : Tensor
        Abscissas, shape (n,), strictly increasing, n >= 3.
    values : Tensor
        Ordinates, shape (n,).

    Returns
    -------
    Tensor
        First derivative at each data point, shape (n,).

    Notes
    -----
    At an interior point the two adjacent chords are compared. If their
    slopes differ in sign or either is zero the point is flat. Otherwise
    the steeper chord is extended to the ordinate of the far neighbour,
    and the slope is taken towards the midpoint between that intersection
    and the neighbour.

    End slopes are obtained from the tangent line at the neighbouring
    point: the slope from the end point to the tangent line's ordinate at
    the interval midpoint, zeroed if its sign disagrees with the outer
    chord. If the outer pair of chords changes sign the end slope is twice
    the outer chord slope instead.

    References
    ----------
    McAllister, D. F. and Roulier, J. A. (1981). "An Algorithm for
    Computing a Shape-Preserving Osculatory Quadratic Spline". ACM
    Transactions on Mathematical Software. 7 (3): 331-347.
    """
    x = knots.tolist()
    y = values.tolist()
    n = len(x)

    m = [0.0] * n
    m1 = m2 = 0.0
    m1_first = m2_first = 0.0

    for i in range(1, n - 1):
        left, right = i - 1, i + 1

        # Slopes of the two chords meeting at point i
        ydif1 = y[i] - y[left]
        ydif2 = y[right] - y[i]
        m1 = ydif1 / (x[i] - x[left])
        m2 = ydif2 / (x[right] - x[i])
        if i == 1:
            m1_first, m2_first = m1, m2

        if m1 == 0.0 or m2 == 0.0 or m1 * m2 <= 0.0:
            m[i] = 0.0
        elif abs(m1) > abs(m2):
            # Extend the chord with slope m1
            xbar = ydif2 / m1 + x[i]
            xhat = (xbar + x[right]) / 2.0
            m[i] = ydif2 / (xhat - x[i])
        else:
            # Extend the chord with slope m2
            xbar = -ydif1 / m2 + x[i]
            xhat = (x[left] + xbar) / 2.0
            m[i] = ydif1 / (x[i] - xhat)

    # Last point
    i, last = n - 2, n - 1
    if m1 * m2 < 0.0:
        m[last] = m2 * 2.0
    else:
        xmid = (x[i] + x[last]) / 2.0
        yxmid = m[i] * (xmid - x[i]) + y[i]
        m[last] = (y[last] - yxmid) / (x[last] - xmid)
        if m[last] * m2 < 0.0:
            m[last] = 0.0

    # First point
    if m1_first * m2_first < 0.0:
        m[0] = m1_first * 2.0
    else:
        xmid = (x[0] + x[1]) / 2.0
        yxmid = m[1] * (xmid - x[1]) + y[1]
        m[0] = (yxmid - y[0]) / (xmid - x[0])
        if m[0] * m1_first < 0.0:
            m[0] = 0.0

    return torch.tensor(m, dtype=values.dtype, device=values.device)
