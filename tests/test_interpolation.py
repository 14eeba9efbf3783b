import importlib

import numpy as np
import pytest

interpolation = importlib.import_module('pumpsel.core.interpolation')
default_interp = interpolation.default_interp

SHORT_X = [0.0, 1.0, 2.5, 4.0, 7.0]
SHORT_Y = [3.0, 5.0, 4.0, 9.0, -1.0]
LONG_X = [0.5 * i for i in range(60)]
LONG_Y = [(x - 10.0) ** 2 for x in LONG_X]


@pytest.mark.parametrize("xs, ys", [(SHORT_X, SHORT_Y), (LONG_X, LONG_Y)])
def test_exact_at_sample_points(xs, ys):
    for x, y in zip(xs, ys):
        assert default_interp(x, xs, ys) == y


@pytest.mark.parametrize("xs, ys", [(SHORT_X, SHORT_Y), (LONG_X, LONG_Y)])
def test_clamped_outside_range(xs, ys):
    assert default_interp(xs[0] - 1, xs, ys) == ys[0]
    assert default_interp(xs[-1] + 1, xs, ys) == ys[-1]


def test_linear_between_samples():
    assert default_interp(0.5, SHORT_X, SHORT_Y) == pytest.approx(4.0)
    assert default_interp(5.5, SHORT_X, SHORT_Y) == pytest.approx(4.0)


def test_midpoints_on_long_grid():
    for i in range(len(LONG_X) - 1):
        x = LONG_X[i] + 0.25
        expected = 0.5 * (LONG_Y[i] + LONG_Y[i + 1])
        assert default_interp(x, LONG_X, LONG_Y) == pytest.approx(expected)


def test_accepts_tuples_and_arrays():
    expected = default_interp(3.3, LONG_X, LONG_Y)
    assert default_interp(3.3, tuple(LONG_X), tuple(LONG_Y)) == expected
    assert default_interp(3.3, np.array(LONG_X), np.array(LONG_Y)) == expected


def test_idempotent():
    first = default_interp(13.3, LONG_X, LONG_Y)
    assert all(default_interp(13.3, LONG_X, LONG_Y) == first for _ in range(10))


def test_monotonic_for_increasing_values():
    xs = [float(i) for i in range(30)]
    ys = [x ** 1.5 for x in xs]
    values = [default_interp(k * 0.01, xs, ys) for k in range(-100, 3100)]
    assert all(b >= a - 1e-12 for a, b in zip(values, values[1:]))


def test_single_sample():
    assert default_interp(-1.0, [2.0], [7.0]) == 7.0
    assert default_interp(5.0, [2.0], [7.0]) == 7.0


def test_contract_violations():
    with pytest.raises(ValueError):
        default_interp(1.0, [0.0, 1.0], [1.0])
    with pytest.raises(ValueError):
        default_interp(1.0, [], [])
