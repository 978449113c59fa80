"""
角到角求解入口。

  - part one: 在原网格上从左上角到右下角
  - part two: 先做 5×5 平铺扩展，再从左上角到右下角

每一部分都计时，耗时以微秒写入日志并随结果返回。
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, TypeVar

from ..settings import settings
from .astar import find_min_cost
from .grid import CostGrid, expand_grid
from .heuristics import Heuristic, heuristic_for_grid

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PuzzleResult:
    part_one: int
    part_two: int
    elapsed_us: Dict[str, int] = field(default_factory=dict)


def timed(label: str, fn: Callable[[], T]) -> tuple[T, int]:
    """执行 fn 并返回 (结果, 耗时微秒)。"""
    start = time.perf_counter()
    value = fn()
    elapsed_us = int((time.perf_counter() - start) * 1_000_000)
    logger.debug("[PUZZLE] %s took %dµs", label, elapsed_us)
    return value, elapsed_us


def _corner_cost(grid: CostGrid, heuristic: Optional[Heuristic]) -> int:
    if heuristic is None:
        heuristic = heuristic_for_grid(settings.HEURISTIC, grid)
    goal = (grid.width - 1, grid.height - 1)
    return find_min_cost(grid, (0, 0), goal, heuristic=heuristic)


def solve_part_one(grid: CostGrid, heuristic: Optional[Heuristic] = None) -> int:
    return _corner_cost(grid, heuristic)


def solve_part_two(
    grid: CostGrid,
    heuristic: Optional[Heuristic] = None,
    factor: Optional[int] = None,
) -> int:
    if factor is None:
        factor = settings.TILE_FACTOR
    return _corner_cost(expand_grid(grid, factor=factor), heuristic)


def solve_puzzle(
    grid: CostGrid,
    heuristic: Optional[Heuristic] = None,
    factor: Optional[int] = None,
) -> PuzzleResult:
    """依次求解两部分，并记录各自耗时。"""
    part_one, t1 = timed("part one", lambda: solve_part_one(grid, heuristic))
    part_two, t2 = timed("part two", lambda: solve_part_two(grid, heuristic, factor))
    return PuzzleResult(
        part_one=part_one,
        part_two=part_two,
        elapsed_us={"part_one": t1, "part_two": t2},
    )


__all__ = ["PuzzleResult", "timed", "solve_part_one", "solve_part_two", "solve_puzzle"]
