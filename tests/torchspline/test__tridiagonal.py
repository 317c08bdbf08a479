"""Tests for the symmetric cyclic tridiagonal solver."""

import pytest
import torch


def _dense(system):
    """Dense matrix of a TridiagonalSystem."""
    n = system.diag.shape[0]
    matrix = torch.diag(system.diag)
    for i in range(n - 1):
        matrix[i, i + 1] = system.upper[i]
        matrix[i + 1, i] = system.upper[i]
    if system.cyclic:
        matrix[0, n - 1] += system.lower[0]
        matrix[n - 1, 0] += system.lower[0]
    return matrix


class TestSolveTridiagonal:
    def test_simple_3x3_system(self):
        """Test solving a simple 3x3 tridiagonal system."""
        from torchspline import TridiagonalSystem, solve_tridiagonal

        # System: [2 1 0] [x0]   [1]
        #         [1 2 1] [x1] = [2]
        #         [0 1 2] [x2]   [1]
        system = TridiagonalSystem(
            lower=torch.tensor([0.0, 1.0, 1.0], dtype=torch.float64),
            diag=torch.tensor([2.0, 2.0, 2.0], dtype=torch.float64),
            upper=torch.tensor([1.0, 1.0, 0.0], dtype=torch.float64),
            cyclic=False,
            batch_size=[],
        )
        rhs = torch.tensor([1.0, 2.0, 1.0], dtype=torch.float64)

        x = solve_tridiagonal(system, rhs)

        torch.testing.assert_close(
            _dense(system) @ x, rhs, rtol=1e-10, atol=1e-10
        )
        torch.testing.assert_close(
            x,
            torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64),
            rtol=1e-10,
            atol=1e-10,
        )

    def test_cyclic_system(self):
        """Cyclic system against torch.linalg.solve."""
        from torchspline import TridiagonalSystem, solve_tridiagonal

        n = 7
        off = torch.linspace(0.5, 1.5, n, dtype=torch.float64)
        system = TridiagonalSystem(
            lower=torch.cat([off[-1:], off[:-1]]),
            diag=4 * torch.ones(n, dtype=torch.float64),
            upper=off.clone(),
            cyclic=True,
            batch_size=[],
        )
        rhs = torch.randn(n, dtype=torch.float64)

        x = solve_tridiagonal(system, rhs)
        expected = torch.linalg.solve(_dense(system), rhs)

        torch.testing.assert_close(x, expected, rtol=1e-10, atol=1e-10)

    def test_larger_system(self):
        """Test a larger system against torch.linalg.solve."""
        from torchspline import TridiagonalSystem, solve_tridiagonal

        n = 50
        upper = torch.rand(n, dtype=torch.float64)
        system = TridiagonalSystem(
            lower=torch.cat([torch.zeros(1, dtype=torch.float64), upper[:-1]]),
            diag=4 * torch.ones(n, dtype=torch.float64),
            upper=upper,
            cyclic=False,
            batch_size=[],
        )
        rhs = torch.randn(n, dtype=torch.float64)

        x = solve_tridiagonal(system, rhs)
        expected = torch.linalg.solve(_dense(system), rhs)

        torch.testing.assert_close(x, expected, rtol=1e-10, atol=1e-10)

    def test_multiple_right_hand_sides(self):
        """Columns of a (n, k) right-hand side are solved independently."""
        from torchspline import TridiagonalSystem, solve_tridiagonal

        system = TridiagonalSystem(
            lower=torch.tensor([1.0, 1.0, 1.0, 1.0], dtype=torch.float64),
            diag=torch.tensor([3.0, 3.0, 3.0, 3.0], dtype=torch.float64),
            upper=torch.tensor([1.0, 1.0, 1.0, 1.0], dtype=torch.float64),
            cyclic=True,
            batch_size=[],
        )
        rhs = torch.tensor(
            [[1.0, 2.0], [2.0, 4.0], [3.0, 6.0], [4.0, 8.0]], dtype=torch.float64
        )

        x = solve_tridiagonal(system, rhs)

        assert x.shape == (4, 2)
        torch.testing.assert_close(x[:, 1], 2 * x[:, 0], rtol=1e-10, atol=1e-10)
        torch.testing.assert_close(
            _dense(system) @ x, rhs, rtol=1e-10, atol=1e-10
        )

    def test_single_row(self):
        from torchspline import TridiagonalSystem, solve_tridiagonal

        system = TridiagonalSystem(
            lower=torch.zeros(1, dtype=torch.float64),
            diag=torch.tensor([4.0], dtype=torch.float64),
            upper=torch.zeros(1, dtype=torch.float64),
            cyclic=False,
            batch_size=[],
        )

        x = solve_tridiagonal(system, torch.tensor([2.0], dtype=torch.float64))

        torch.testing.assert_close(
            x, torch.tensor([0.5], dtype=torch.float64), rtol=1e-10, atol=1e-10
        )

    def test_leaves_rhs_untouched(self):
        """The convenience wrapper works on a copy of rhs."""
        from torchspline import TridiagonalSystem, solve_tridiagonal

        system = TridiagonalSystem(
            lower=torch.tensor([0.0, 1.0, 1.0], dtype=torch.float64),
            diag=torch.tensor([2.0, 2.0, 2.0], dtype=torch.float64),
            upper=torch.tensor([1.0, 1.0, 0.0], dtype=torch.float64),
            cyclic=False,
            batch_size=[],
        )
        rhs = torch.tensor([1.0, 2.0, 1.0], dtype=torch.float64)

        solve_tridiagonal(system, rhs)

        assert rhs.tolist() == [1.0, 2.0, 1.0]


class TestTridiagonalDecompose:
    def test_solve_overwrites_rhs(self):
        """tridiagonal_solve returns the right-hand side buffer itself."""
        from torchspline import (
            TridiagonalSystem,
            tridiagonal_decompose,
            tridiagonal_solve,
        )

        system = TridiagonalSystem(
            lower=torch.tensor([0.0, 1.0, 1.0], dtype=torch.float64),
            diag=torch.tensor([2.0, 2.0, 2.0], dtype=torch.float64),
            upper=torch.tensor([1.0, 1.0, 0.0], dtype=torch.float64),
            cyclic=False,
            batch_size=[],
        )
        rhs = torch.tensor([1.0, 2.0, 1.0], dtype=torch.float64)

        factor = tridiagonal_decompose(system)
        x = tridiagonal_solve(factor, rhs)

        assert x is rhs
        torch.testing.assert_close(
            rhs,
            torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64),
            rtol=1e-10,
            atol=1e-10,
        )

    def test_factor_diagonal_positive(self):
        from torchspline import TridiagonalSystem, tridiagonal_decompose

        n = 6
        system = TridiagonalSystem(
            lower=torch.ones(n, dtype=torch.float64),
            diag=3 * torch.ones(n, dtype=torch.float64),
            upper=torch.ones(n, dtype=torch.float64),
            cyclic=True,
            batch_size=[],
        )

        factor = tridiagonal_decompose(system)

        assert factor.diag.shape == (n,)
        assert torch.all(factor.diag > 0)
        assert factor.cyclic

    def test_not_positive_definite(self):
        """A non-positive pivot raises SingularSystemError."""
        from torchspline import (
            SingularSystemError,
            TridiagonalSystem,
            tridiagonal_decompose,
        )

        system = TridiagonalSystem(
            lower=torch.tensor([0.0, 2.0, 2.0], dtype=torch.float64),
            diag=torch.tensor([1.0, 2.0, 1.0], dtype=torch.float64),
            upper=torch.tensor([2.0, 2.0, 0.0], dtype=torch.float64),
            cyclic=False,
            batch_size=[],
        )

        with pytest.raises(SingularSystemError):
            tridiagonal_decompose(system)

    def test_zero_pivot(self):
        from torchspline import (
            SingularSystemError,
            SplineError,
            TridiagonalSystem,
            tridiagonal_decompose,
        )

        system = TridiagonalSystem(
            lower=torch.zeros(3, dtype=torch.float64),
            diag=torch.zeros(3, dtype=torch.float64),
            upper=torch.zeros(3, dtype=torch.float64),
            cyclic=False,
            batch_size=[],
        )

        with pytest.raises(SingularSystemError):
            tridiagonal_decompose(system)

        assert issubclass(SingularSystemError, SplineError)

    def test_empty_system(self):
        from torchspline import (
            SingularSystemError,
            TridiagonalSystem,
            tridiagonal_decompose,
        )

        empty = torch.zeros(0, dtype=torch.float64)
        system = TridiagonalSystem(
            lower=empty,
            diag=empty.clone(),
            upper=empty.clone(),
            cyclic=False,
            batch_size=[],
        )

        with pytest.raises(SingularSystemError):
            tridiagonal_decompose(system)
