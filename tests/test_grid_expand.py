"""
5×5 平铺扩展的测试模块。
"""

from __future__ import annotations

import numpy as np
import pytest

from gridroute.core.grid import CostGrid, expand_grid, make_example_grid, parse_cost_grid, wrap_cost
from gridroute.exceptions import EmptyGridError


def test_wrap_cost_cycles_through_one_to_nine():
    values = np.arange(1, 19)
    wrapped = wrap_cost(values)
    assert wrapped.tolist() == [1, 2, 3, 4, 5, 6, 7, 8, 9, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert wrap_cost(9) == 9
    assert wrap_cost(10) == 1


def test_expand_example_first_and_last_rows():
    """与已知的扩展结果逐字符对照。"""
    big = expand_grid(make_example_grid())
    rows = big.to_rows()

    assert rows[0] == "11637517422274862853338597396444961841755517295286"
    assert rows[-1].startswith("6755488935")
    assert rows[-1].endswith("1299833479")


def test_expand_shape_is_five_times(rng):
    for ny, nx in [(1, 1), (1, 4), (3, 2), (10, 10)]:
        grid = CostGrid(cost=rng.integers(1, 10, size=(ny, nx)))
        big = expand_grid(grid)
        assert big.shape() == (5 * ny, 5 * nx)


def test_expand_values_stay_in_range_and_follow_rule(rng):
    """每个副本 (tx, ty) 的值都等于 wrap(原值 + tx + ty)，且都在 [1, 9]。"""
    cost = rng.integers(1, 10, size=(4, 6))
    grid = CostGrid(cost=cost)
    big = grid.expand()

    assert big.cost.min() >= 1
    assert big.cost.max() <= 9

    ny, nx = cost.shape
    for ty in range(5):
        for tx in range(5):
            tile = big.cost[ty * ny:(ty + 1) * ny, tx * nx:(tx + 1) * nx].astype(int)
            expected = (cost + tx + ty - 1) % 9 + 1
            np.testing.assert_array_equal(tile, expected)


def test_expand_all_nines_wraps_to_one():
    big = expand_grid(parse_cost_grid(["9"]))
    expected = [[(9 + tx + ty - 1) % 9 + 1 for tx in range(5)] for ty in range(5)]
    assert big.cost.tolist() == expected
    assert big.cost_at((1, 0)) == 1
    assert big.cost_at((4, 4)) == 8


def test_expand_is_deterministic_and_leaves_input_untouched():
    grid = make_example_grid()
    before = grid.cost.copy()
    a = expand_grid(grid)
    b = expand_grid(grid)

    np.testing.assert_array_equal(a.cost, b.cost)
    np.testing.assert_array_equal(grid.cost, before)
    assert not a.cost.flags.writeable


def test_expand_custom_factor():
    grid = parse_cost_grid(["18", "92"])
    big = expand_grid(grid, factor=2)
    assert big.to_rows() == ["1829", "9213", "2931", "1324"]
    assert expand_grid(grid, factor=1).to_rows() == ["18", "92"]


def test_expand_rejects_bad_factor():
    with pytest.raises(ValueError):
        expand_grid(make_example_grid(), factor=0)


def test_expand_empty_grid_raises():
    empty = CostGrid(cost=np.empty((0, 0), dtype=np.uint8))
    with pytest.raises(EmptyGridError) as exc_info:
        expand_grid(empty)
    assert exc_info.value.code == "EMPTY_GRID"
