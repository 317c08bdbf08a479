"""Tests for the abscissa binary search."""

import warnings

import torch

from torchspline import locate_interval, locate_intervals


class TestLocateInterval:
    def test_exact_match(self):
        """Keys equal to an abscissa return its index."""
        abscissas = [0.0, 1.0, 2.0, 3.0]

        for i, key in enumerate(abscissas):
            assert locate_interval(abscissas, key) == (i, True)

    def test_between_abscissas(self):
        """Keys between abscissas return the lower bracket."""
        abscissas = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)

        assert locate_interval(abscissas, 0.5) == (0, False)
        assert locate_interval(abscissas, 1.5) == (1, False)
        assert locate_interval(abscissas, 2.999) == (2, False)

    def test_outside_range(self):
        """Keys below the range give -1, above give the last index."""
        abscissas = [0.0, 1.0, 2.0, 3.0]

        assert locate_interval(abscissas, -1.0) == (-1, False)
        assert locate_interval(abscissas, 10.0) == (3, False)

    def test_single_abscissa(self):
        assert locate_interval([1.0], 1.0) == (0, True)
        assert locate_interval([1.0], 0.0) == (-1, False)
        assert locate_interval([1.0], 2.0) == (0, False)


class TestLocateIntervals:
    def test_matches_scalar_search(self):
        """Vectorized search agrees with the scalar search."""
        abscissas = torch.tensor([0.0, 0.5, 2.0, 2.5, 4.0], dtype=torch.float64)
        keys = torch.tensor(
            [-1.0, 0.0, 0.25, 0.5, 1.0, 2.0, 2.25, 4.0, 5.0], dtype=torch.float64
        )

        indices, exact = locate_intervals(abscissas, keys)

        for j, key in enumerate(keys.tolist()):
            index, found = locate_interval(abscissas, key)
            assert indices[j].item() == index
            assert exact[j].item() == found

    def test_preserves_shape(self):
        abscissas = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
        keys = torch.tensor([[0.5, 1.0], [1.5, 2.0]], dtype=torch.float64)

        indices, exact = locate_intervals(abscissas, keys)

        assert indices.shape == (2, 2)
        assert exact.shape == (2, 2)
        assert indices.tolist() == [[0, 1], [1, 2]]
        assert exact.tolist() == [[False, True], [False, True]]

    def test_strided_abscissas(self):
        """A column view of a point tensor is searched without warnings."""
        points = torch.tensor(
            [[0.0, 5.0], [1.0, 6.0], [2.0, 7.0]], dtype=torch.float64
        )
        abscissas = points[:, 0]
        keys = torch.tensor([0.5, 2.0], dtype=torch.float64)

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            indices, exact = locate_intervals(abscissas, keys)

        assert indices.tolist() == [0, 2]
        assert exact.tolist() == [False, True]
