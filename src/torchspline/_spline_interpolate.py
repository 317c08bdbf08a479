import torch
from torch import Tensor

from ._knot_error import KnotError
from ._natural_spline import natural_spline
from ._quadratic_spline import quadratic_spline

_METHODS = {
    "natural": natural_spline,
    "quadratic": quadratic_spline,
}


def spline_interpolate(
    x: Tensor,
    y: Tensor,
    query: Tensor,
    method: str = "natural",
) -> Tensor:
    """
    Interpolate sampled values with the selected spline method.

    Parameters
    ----------
    x : Tensor
        Sample abscissas, shape (n,), non-decreasing with at least 3 points.
    y : Tensor
        Sample ordinates, shape (n,).
    query : Tensor
        Abscissas to evaluate, shape (m,). The ``"quadratic"`` method
        requires them to be non-decreasing.
    method : str, optional
        ``"natural"`` (default) for a natural cubic spline or
        ``"quadratic"`` for a shape-preserving quadratic spline.

    Returns
    -------
    Tensor
        Interpolated ordinates, shape (m,).

    Raises
    ------
    ValueError
        If ``method`` is unknown or ``x`` and ``y`` are not 1-D.
    KnotError
        If ``x`` and ``y`` differ in length, there are fewer than 3
        points, or ``x`` decreases somewhere or is constant.

    Examples
    --------
    >>> import torch
    >>> x = torch.tensor([0., 1., 2.])
    >>> y = torch.tensor([0., 1., 0.])
    >>> spline_interpolate(x, y, torch.tensor([0.5, 1.5]))
    """
    if method not in _METHODS:
        raise ValueError(
            f"Unknown interpolation method: {method!r} "
            f"(expected one of {', '.join(map(repr, _METHODS))})"
        )

    x = torch.as_tensor(x)
    if not x.is_floating_point():
        x = x.to(torch.float64)
    y = torch.as_tensor(y, dtype=x.dtype, device=x.device)

    if x.dim() != 1 or y.dim() != 1:
        raise ValueError("x and y must be 1-D")

    if x.shape[0] != y.shape[0]:
        raise KnotError(
            f"x and y must have the same length, got {x.shape[0]} and {y.shape[0]}"
        )

    if x.shape[0] < 3:
        raise KnotError(f"Need at least 3 points, got {x.shape[0]}")

    if torch.any(x[1:] < x[:-1]):
        raise KnotError("x must be monotonically increasing")

    if x[0] == x[-1]:
        raise KnotError("x must not be constant")

    points = torch.stack([x, y], dim=-1)

    return _METHODS[method](points, query)[:, 1]
