from typing import Sequence, Tuple, Union

import torch
from torch import Tensor


def locate_interval(
    abscissas: Union[Tensor, Sequence[float]],
    key: float,
) -> Tuple[int, bool]:
    """
    Binary search for the interval of a sorted abscissa sequence holding key.

    Parameters
    ----------
    abscissas : Tensor or sequence of float
        Abscissas sorted in ascending order, shape (n,).
    key : float
        Value to locate.

    Returns
    -------
    index : int
        If ``key`` equals one of the abscissas, the index of that abscissa.
        Otherwise the largest ``i`` with ``abscissas[i] < key``, or -1 when
        ``key`` lies below the first abscissa.
    exact : bool
        Whether ``key`` was found exactly.

    Notes
    -----
    The abscissas must be sorted; this is not checked.
    """
    if isinstance(abscissas, Tensor):
        abscissas = abscissas.tolist()
    key = float(key)

    low = 0
    high = len(abscissas) - 1

    while high >= low:
        mid = (high + low) // 2
        if key > abscissas[mid]:
            low = mid + 1
        elif key < abscissas[mid]:
            high = mid - 1
        else:
            return mid, True

    # high == low - 1 and abscissas[high] < key < abscissas[low]
    return high, False


def locate_intervals(
    abscissas: Tensor,
    keys: Tensor,
) -> Tuple[Tensor, Tensor]:
    """
    Vectorized :func:`locate_interval` over a tensor of keys.

    Parameters
    ----------
    abscissas : Tensor
        Abscissas sorted in ascending order, shape (n,).
    keys : Tensor
        Values to locate, any shape.

    Returns
    -------
    indices : Tensor
        ``int64`` tensor of the same shape as ``keys``. Exact matches give the
        matching index, all other keys the largest ``i`` with
        ``abscissas[i] < key`` (-1 below the first abscissa).
    exact : Tensor
        Boolean tensor, True where the key matched an abscissa.
    """
    abscissas = abscissas.contiguous()
    keys = keys.to(abscissas.dtype).contiguous()

    # Number of abscissas strictly less than each key
    below = torch.searchsorted(abscissas, keys, right=False)

    candidate = torch.clamp(below, max=abscissas.shape[0] - 1)
    exact = abscissas[candidate] == keys

    indices = torch.where(exact, candidate, below - 1)

    return indices, exact
