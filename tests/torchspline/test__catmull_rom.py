"""Tests for Catmull-Rom spline functions."""

import pytest
import torch

from torchspline import (
    CatmullRomSpline,
    catmull_rom_coefficients,
    catmull_rom_evaluate,
    catmull_rom_fit,
    catmull_rom_spline,
)


class TestCatmullRomFit:
    def test_padding(self):
        """First point is repeated once in front, last point twice behind."""
        points = torch.tensor([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])

        spline = catmull_rom_fit(points)

        assert isinstance(spline, CatmullRomSpline)
        assert spline.control_points.shape == (6, 2)
        assert spline.control_points.tolist() == [
            [0.0, 0.0],
            [0.0, 0.0],
            [1.0, 1.0],
            [2.0, 0.0],
            [2.0, 0.0],
            [2.0, 0.0],
        ]

    def test_integer_points(self):
        spline = catmull_rom_fit([[0, 0], [1, 1], [2, 0]])

        assert spline.control_points.dtype == torch.float64

    def test_invalid_shape(self):
        with pytest.raises(ValueError):
            catmull_rom_fit(torch.zeros(4, 3))


class TestCatmullRomCoefficients:
    def test_basis(self):
        window = torch.tensor(
            [[0.0, 0.0], [1.0, 1.0], [2.0, 1.0], [3.0, 0.0]], dtype=torch.float64
        )

        a, b, c, d = catmull_rom_coefficients(window)

        assert a.tolist() == [0.0, 0.0]
        assert b.tolist() == [0.0, -1.0]
        assert c.tolist() == [2.0, 1.0]
        assert d.tolist() == [2.0, 2.0]

    def test_batched_windows(self):
        windows = torch.randn(5, 4, 2, dtype=torch.float64)

        a, b, c, d = catmull_rom_coefficients(windows)

        for coefficient in (a, b, c, d):
            assert coefficient.shape == (5, 2)


class TestCatmullRomEvaluate:
    def test_passes_through_interior_points(self):
        """Spline should pass through interior control points."""
        points = torch.tensor([[0.0, 0.0], [1.0, 1.0], [2.0, 1.0], [3.0, 0.0]])

        result = catmull_rom_spline(
            points, torch.tensor([1, 1]), torch.tensor([0.0, 1.0])
        )

        assert torch.equal(result[0], points[1])
        assert torch.equal(result[1], points[2])

    def test_passes_through_end_points(self):
        """Padding makes the first and last data points interpolated."""
        points = torch.tensor(
            [[0.0, 0.0], [1.0, 2.0], [3.0, 1.0], [4.0, 3.0]], dtype=torch.float64
        )

        result = catmull_rom_spline(
            points, torch.tensor([0, 2, 3]), torch.tensor([0.0, 1.0, 0.0])
        )

        assert torch.equal(result[0], points[0])
        assert torch.equal(result[1], points[3])
        assert torch.equal(result[2], points[3])

    def test_every_data_point(self):
        points = torch.randn(7, 2, dtype=torch.float64)
        interval = torch.arange(7)

        result = catmull_rom_spline(points, interval, torch.zeros(7))

        torch.testing.assert_close(result, points, rtol=1e-12, atol=1e-12)

    def test_equally_spaced_line(self):
        """Equally spaced collinear points are interpolated linearly."""
        points = torch.tensor(
            [[0.0, 0.0], [1.0, 2.0], [2.0, 4.0], [3.0, 6.0]], dtype=torch.float64
        )

        result = catmull_rom_spline(
            points, torch.tensor([1, 1, 1]), torch.tensor([0.25, 0.5, 0.75])
        )

        torch.testing.assert_close(
            result,
            torch.tensor(
                [[1.25, 2.5], [1.5, 3.0], [1.75, 3.5]], dtype=torch.float64
            ),
            rtol=1e-12,
            atol=1e-12,
        )

    def test_tangent_at_data_point(self):
        """The tangent at P1 is half the difference of its neighbours."""
        points = torch.tensor(
            [[0.0, 0.0], [1.0, 3.0], [4.0, 1.0], [5.0, 5.0]], dtype=torch.float64
        )
        spline = catmull_rom_fit(points)
        h = 1e-6

        left = catmull_rom_evaluate(spline, torch.tensor([1]), torch.tensor([0.0]))
        right = catmull_rom_evaluate(spline, torch.tensor([1]), torch.tensor([h]))

        torch.testing.assert_close(
            (right - left)[0] / h,
            (points[2] - points[0]) / 2,
            rtol=1e-4,
            atol=1e-4,
        )

    def test_query_shape_preserved(self):
        points = torch.randn(5, 2, dtype=torch.float64)
        spline = catmull_rom_fit(points)

        interval = torch.randint(0, 4, (3, 4))
        t = torch.rand(3, 4, dtype=torch.float64)

        result = catmull_rom_evaluate(spline, interval, t)

        assert result.shape == (3, 4, 2)

    def test_dtype_follows_points(self):
        points = torch.tensor([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])

        result = catmull_rom_spline(points, torch.tensor([0]), torch.tensor([0.5]))

        assert result.dtype == torch.float32
