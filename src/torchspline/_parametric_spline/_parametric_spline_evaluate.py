from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._parametric_spline import ParametricCubicSpline

# Shrinks the sampling step so accumulated roundoff cannot step past the
# end of the curve.
_STEP_SHRINK = 1.0 - 1e-7


def parametric_cubic_spline_evaluate(
    spline: ParametricCubicSpline,
    sample_count: int,
) -> Tensor:
    """
    Sample a parametric cubic spline at equally spaced arc lengths.

    Parameters
    ----------
    spline : ParametricCubicSpline
        Fitted spline from parametric_cubic_spline_fit.
    sample_count : int
        Number of samples, at least 2.

    Returns
    -------
    Tensor
        Points along the curve, shape (sample_count, 2). The first sample
        is the first data point and the last sample the end of the curve.

    Notes
    -----
    Within interval i of length d, at local parameter t in [0, d]::

        s(t) = p[i] + t*((p[i+1] - p[i])/d + (t - d)*(a + t*b))

    with a = (M[i+1] + 2*M[i]) / 6 and b = (M[i+1] - M[i]) / (6*d).
    """
    if sample_count < 2:
        raise ValueError(f"Need at least 2 samples, got {sample_count}")

    points = spline.points
    second = spline.second_derivatives
    lengths = spline.lengths[:-1]  # (n_intervals,)
    n_intervals = lengths.shape[0]

    ends = torch.cumsum(lengths, dim=0)
    starts = ends - lengths
    total = ends[-1]

    step = _STEP_SHRINK * total / (sample_count - 1)
    s = torch.arange(sample_count, dtype=points.dtype, device=points.device) * step
    s[-1] = total

    # A sample on an interval boundary belongs to the interval it ends
    segment_idx = torch.searchsorted(ends, s, right=False)
    segment_idx = torch.clamp(segment_idx, 0, n_intervals - 1)

    t = (s - starts[segment_idx]).unsqueeze(-1)
    d = lengths[segment_idx].unsqueeze(-1)

    p = points[segment_idx]
    q = points[segment_idx + 1]
    m0 = second[segment_idx]
    m1 = second[segment_idx + 1]

    h = (q - p) / d
    a = (m1 + 2.0 * m0) / 6.0
    b = (m1 - m0) / (6.0 * d)

    return p + t * (h + (t - d) * (a + t * b))
