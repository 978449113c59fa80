"""
启发函数模块。

A* 的启发函数以策略对象的形式传入求解器，签名为 heuristic(coord, goal) -> int。
这里提供三种可采纳（admissible）的启发函数：
  - zero: 恒为 0，A* 退化为 Dijkstra
  - manhattan: 曼哈顿距离，每步代价至少为 1，因此不会高估
  - scaled_manhattan: 曼哈顿距离 × 网格最小代价，更紧但仍可采纳

这个模块被 CLI 和 puzzle 入口共同使用，确保启发函数名称一致。
"""

from __future__ import annotations

from typing import Callable, Dict, List

from .grid import Coord, CostGrid, MIN_COST

Heuristic = Callable[[Coord, Coord], int]


def zero_heuristic(coord: Coord, goal: Coord) -> int:
    return 0


def manhattan_heuristic(coord: Coord, goal: Coord) -> int:
    """曼哈顿距离：|gx - x| + |gy - y|。"""
    x, y = coord
    gx, gy = goal
    return abs(gx - x) + abs(gy - y)


def scaled_manhattan(min_cost: int) -> Heuristic:
    """
    返回 曼哈顿距离 × min_cost 的启发函数。

    min_cost 应为网格中最小的单格代价；每走一步至少花费 min_cost，
    因此该估计仍不会超过真实剩余代价。
    """
    if min_cost < MIN_COST:
        raise ValueError(f"min_cost must be >= {MIN_COST}, got {min_cost}")

    def _scaled(coord: Coord, goal: Coord) -> int:
        return manhattan_heuristic(coord, goal) * min_cost

    _scaled.__name__ = f"scaled_manhattan_x{min_cost}"
    return _scaled


# ============================================================================
# 启发函数注册表
# ============================================================================

HEURISTICS: Dict[str, Heuristic] = {
    "zero": zero_heuristic,
    "manhattan": manhattan_heuristic,
}

# 需要网格信息才能构造的启发函数
GRID_HEURISTICS = ("scaled_manhattan",)


def list_heuristics() -> List[str]:
    """返回所有可用的启发函数名称。"""
    return list(HEURISTICS.keys()) + list(GRID_HEURISTICS)


def get_heuristic(name: str) -> Heuristic:
    """
    按名称获取与网格无关的启发函数。

    Raises:
        ValueError: 名称未知，或该启发函数需要网格（请用 heuristic_for_grid）
    """
    key = name.strip().lower()
    if key in HEURISTICS:
        return HEURISTICS[key]
    if key in GRID_HEURISTICS:
        raise ValueError(f"heuristic {name!r} depends on the grid, use heuristic_for_grid()")
    raise ValueError(f"unknown heuristic {name!r}, available: {list_heuristics()}")


def heuristic_for_grid(name: str, grid: CostGrid) -> Heuristic:
    """按名称获取启发函数，scaled_manhattan 会根据 grid 的最小代价构造。"""
    key = name.strip().lower()
    if key == "scaled_manhattan":
        min_cost = int(grid.cost.min()) if grid.cost.size else MIN_COST
        return scaled_manhattan(min_cost)
    return get_heuristic(key)


def heuristic_name(heuristic: Heuristic) -> str:
    """反查启发函数名称，未注册的返回函数名。"""
    for name, fn in HEURISTICS.items():
        if fn is heuristic:
            return name
    return getattr(heuristic, "__name__", repr(heuristic))


__all__ = [
    "Heuristic",
    "zero_heuristic",
    "manhattan_heuristic",
    "scaled_manhattan",
    "HEURISTICS",
    "GRID_HEURISTICS",
    "list_heuristics",
    "get_heuristic",
    "heuristic_for_grid",
    "heuristic_name",
]
