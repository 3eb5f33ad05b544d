import math

import pytest

from supersimplex.gradients import (
    N2,
    N3,
    N4,
    PMASK,
    PSIZE,
    gradients_2d,
    gradients_3d,
    gradients_4d,
)


@pytest.mark.parametrize(
    "table, dims",
    [(gradients_2d, 2), (gradients_3d, 3), (gradients_4d, 4)],
)
def test_table_shape(table, dims):
    grads = table()
    assert len(grads) == PSIZE
    assert all(len(g) == dims for g in grads)


@pytest.mark.parametrize("table", [gradients_2d, gradients_3d, gradients_4d])
def test_pmask_wraps_table_indices(table):
    grads = table()
    assert len(grads) == PMASK + 1
    assert grads[PSIZE & PMASK] == grads[0]
    assert grads[(PSIZE + 7) & PMASK] == grads[7]
    assert grads[-1 & PMASK] == grads[PSIZE - 1]


@pytest.mark.parametrize(
    "table, period",
    [(gradients_2d, 24), (gradients_3d, 48), (gradients_4d, 160)],
)
def test_tables_repeat_with_base_period(table, period):
    grads = table()
    for i in (0, 1, period - 1, period, period + 5, PSIZE - 1):
        assert grads[i] == grads[i % period]
    assert grads[0] != grads[1]


def test_first_2d_gradient_is_normalised_source_value():
    dx, dy = gradients_2d()[0]
    assert dx == pytest.approx(0.130526192220052 / N2)
    assert dy == pytest.approx(0.99144486137381 / N2)


def test_first_3d_gradient_is_normalised_source_value():
    assert gradients_3d()[0] == pytest.approx(
        (-2.22474487139 / N3, -2.22474487139 / N3, -1.0 / N3)
    )


def test_last_4d_base_gradient_is_normalised_source_value():
    expected = (
        0.753341017856078 / N4,
        0.37968289875261624 / N4,
        0.37968289875261624 / N4,
        0.37968289875261624 / N4,
    )
    assert gradients_4d()[159] == pytest.approx(expected)


def test_2d_gradients_have_uniform_length():
    lengths = [math.hypot(*g) * N2 for g in gradients_2d()[:24]]
    assert all(length == pytest.approx(1.0, abs=1e-9) for length in lengths)


def test_3d_gradients_have_uniform_length():
    lengths = [math.sqrt(sum(c * c for c in g)) for g in gradients_3d()[:48]]
    assert max(lengths) - min(lengths) < 1e-6


def test_4d_gradients_are_unit_before_normalisation():
    for g in gradients_4d()[:160]:
        assert math.sqrt(sum(c * c for c in g)) * N4 == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("table, period", [(gradients_2d, 24), (gradients_3d, 48)])
def test_base_sets_are_balanced(table, period):
    base = table()[:period]
    for axis in range(len(base[0])):
        assert sum(g[axis] for g in base) == pytest.approx(0.0, abs=1e-9)


def test_tables_are_cached_and_immutable():
    grads = gradients_2d()
    assert gradients_2d() is grads
    with pytest.raises(TypeError):
        grads[0] = (0.0, 0.0)  # type: ignore[index]