import torch
from torch import Tensor

from ._knot_error import KnotError

_EXTRAPOLATE_MODES = ("extrapolate", "warn", "error", "zero")


def as_points(points) -> Tensor:
    """Convert ``points`` to a floating tensor of shape (n, 2)."""
    points = torch.as_tensor(points)
    if not points.is_floating_point():
        points = points.to(torch.float64)

    if points.dim() != 2 or points.shape[-1] != 2:
        raise ValueError(
            f"Expected points of shape (n, 2), got {tuple(points.shape)}"
        )

    return points


def as_query(query, like: Tensor) -> Tensor:
    """Convert ``query`` to a tensor with the dtype and device of ``like``."""
    return torch.as_tensor(query, dtype=like.dtype, device=like.device)


def check_knots(x: Tensor, strict: bool = True, min_points: int = 3) -> None:
    """
    Validate the abscissas of a point sequence.

    Parameters
    ----------
    x : Tensor
        Abscissas, shape (n,).
    strict : bool
        Require strictly increasing abscissas. Otherwise repeated
        abscissas are accepted and only a decrease is rejected.
    min_points : int
        Minimum number of points.

    Raises
    ------
    KnotError
        If there are fewer than ``min_points`` points or the abscissas
        are out of order.
    """
    n = x.shape[0]
    if n < min_points:
        raise KnotError(f"Need at least {min_points} points, got {n}")

    dx = x[1:] - x[:-1]
    if strict:
        if not torch.all(dx > 0):
            raise KnotError("Knots must be strictly increasing")
    elif torch.any(dx < 0):
        raise KnotError("Knots must be monotonically increasing")


def check_extrapolate(extrapolate: str, allowed=_EXTRAPOLATE_MODES) -> None:
    if extrapolate not in allowed:
        raise ValueError(
            f"Unknown extrapolation mode: {extrapolate!r} "
            f"(expected one of {', '.join(map(repr, allowed))})"
        )
