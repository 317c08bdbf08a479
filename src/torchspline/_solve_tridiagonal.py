import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._singular_system_error import SingularSystemError


@tensorclass
class TridiagonalSystem:
    """Symmetric tridiagonal matrix, optionally with cyclic corner entries.

    Row i of the system reads::

        lower[i] * x[i-1] + diag[i] * x[i] + upper[i] * x[i+1] = b[i]

    For a cyclic system the indices wrap around, so ``lower[0]`` is the
    corner entry A[0, n-1] and ``upper[n-1]`` is A[n-1, 0].

    Attributes
    ----------
    lower : Tensor
        Sub-diagonal, shape (n,). Only ``lower[0]`` (the corner) is read;
        the rest must equal ``upper[:-1]``.
    diag : Tensor
        Main diagonal, shape (n,).
    upper : Tensor
        Super-diagonal, shape (n,). ``upper[n-1]`` is never read; by
        symmetry the corner A[n-1, 0] is ``lower[0]``.
    cyclic : bool
        Whether the system wraps around (closed contours).
    """

    lower: Tensor
    diag: Tensor
    upper: Tensor
    cyclic: bool


@tensorclass
class TridiagonalFactor:
    """Decomposition A = C^T D C of a :class:`TridiagonalSystem`.

    C is unit upper triangular with non-zero entries only on the first
    super-diagonal and in the last column.

    Attributes
    ----------
    diag : Tensor
        D, shape (n,). Strictly positive.
    upper : Tensor
        C[i, i+1] for i < n-2, shape (n,).
    last_column : Tensor
        C[i, n-1] for i <= n-2, shape (n,).
    cyclic : bool
        Whether the decomposed system was cyclic.
    """

    diag: Tensor
    upper: Tensor
    last_column: Tensor
    cyclic: bool


def tridiagonal_decompose(system: TridiagonalSystem) -> TridiagonalFactor:
    """
    Cholesky-style decomposition of a symmetric (cyclic) tridiagonal system.

    Parameters
    ----------
    system : TridiagonalSystem
        Symmetric, positive definite system of n >= 1 rows.

    Returns
    -------
    TridiagonalFactor
        The factors C and D.

    Raises
    ------
    SingularSystemError
        If the system is empty or a pivot of D is not strictly positive,
        i.e. the matrix is not positive definite.
    """
    a_diag = system.diag.tolist()
    a_upper = system.upper.tolist()
    n = len(a_diag)

    if n < 1:
        raise SingularSystemError("Tridiagonal system must have at least 1 row")

    diag = list(a_diag)
    upper = [0.0] * n
    last_column = [0.0] * n

    d = diag[0]
    if d <= 0.0:
        raise SingularSystemError(
            f"Tridiagonal system is not positive definite (pivot 0 is {d})"
        )

    # A[0, n-1]
    m_n = system.lower[0].item() if system.cyclic else 0.0
    # A[n-1, n-1], reduced as the corner column is eliminated
    m_nn = a_diag[n - 1]

    for i in range(n - 2):
        m_ij = a_upper[i]
        upper[i] = m_ij / d
        last_column[i] = m_n / d
        m_nn -= last_column[i] * m_n
        m_n = -upper[i] * m_n
        d = a_diag[i + 1] - upper[i] * m_ij
        if d <= 0.0:
            raise SingularSystemError(
                f"Tridiagonal system is not positive definite "
                f"(pivot {i + 1} is {d})"
            )
        diag[i + 1] = d

    if n >= 2:
        # Complete the last column with A[n-2, n-1]
        m_n += a_upper[n - 2]
        last_column[n - 2] = m_n / d
        d = m_nn - last_column[n - 2] * m_n
        if d <= 0.0:
            raise SingularSystemError(
                f"Tridiagonal system is not positive definite "
                f"(pivot {n - 1} is {d})"
            )
        diag[n - 1] = d

    options = {"dtype": system.diag.dtype, "device": system.diag.device}

    return TridiagonalFactor(
        diag=torch.tensor(diag, **options),
        upper=torch.tensor(upper, **options),
        last_column=torch.tensor(last_column, **options),
        cyclic=system.cyclic,
        batch_size=[],
    )


def tridiagonal_solve(factor: TridiagonalFactor, rhs: Tensor) -> Tensor:
    """
    Solve A x = b given the decomposition of A.

    Parameters
    ----------
    factor : TridiagonalFactor
        Result of :func:`tridiagonal_decompose`.
    rhs : Tensor
        Right-hand side b, shape (n,) or (n, k) for k systems sharing A.

    Returns
    -------
    Tensor
        The solution x. This is ``rhs`` itself: the right-hand side is
        overwritten in place so no second buffer is allocated.

    Notes
    -----
    There is no error path; the result is only meaningful for a factor
    returned by a successful :func:`tridiagonal_decompose`.
    """
    diag = factor.diag
    upper = factor.upper
    last_column = factor.last_column

    n = diag.shape[0]
    m = n - 1
    k = n - 2

    # b = C^{-T} b
    tail = rhs[m].clone()
    for i in range(k):
        rhs[i + 1] -= upper[i] * rhs[i]
        tail -= last_column[i] * rhs[i]
    if k >= 0:
        rhs[m] = tail - last_column[k] * rhs[k]

    # b = D^{-1} b
    rhs.div_(diag.view(-1, *([1] * (rhs.dim() - 1))))

    # b = C^{-1} b
    tail = rhs[m].clone()
    if k >= 0:
        rhs[k] -= last_column[k] * tail
    for i in range(k - 1, -1, -1):
        rhs[i] -= upper[i] * rhs[i + 1] + last_column[i] * tail

    return rhs


def solve_tridiagonal(system: TridiagonalSystem, rhs: Tensor) -> Tensor:
    """
    Solve a symmetric (cyclic) tridiagonal system A x = b.

    Convenience wrapper around :func:`tridiagonal_decompose` and
    :func:`tridiagonal_solve` that leaves ``rhs`` untouched.

    The matrix A has the form (c = lower[0], zero unless cyclic)::

        [d0  u0   0  ...   0   c ]
        [u0  d1  u1  ...   0   0 ]
        [        ...             ]
        [c    0   0  ... un-2 dn-1]

    Parameters
    ----------
    system : TridiagonalSystem
        Symmetric positive definite system, n rows.
    rhs : Tensor
        Right-hand side, shape (n,) or (n, k).

    Returns
    -------
    Tensor
        Solution x, same shape as ``rhs``.

    Raises
    ------
    SingularSystemError
        If the system is not positive definite.
    """
    factor = tridiagonal_decompose(system)
    return tridiagonal_solve(factor, rhs.clone())
