"""
A* 最小代价搜索模块。

在四邻接代价网格上做启发式最优优先搜索，返回从起点到终点的最小总代价
（起点自身代价不计，其余每进入一格加一次该格代价）。
启发函数以参数传入；零启发时等价于 Dijkstra。
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Optional

from ..exceptions import OutOfBoundsError, UnreachableError
from .grid import Coord, CostGrid
from .heuristics import Heuristic, heuristic_name, manhattan_heuristic

logger = logging.getLogger(__name__)

_UNSET = -1


@dataclass
class SearchResult:
    cost: int
    expanded: int
    pushed: int
    heuristic: str


def find_min_cost(
    grid: CostGrid,
    start: Coord,
    goal: Coord,
    heuristic: Optional[Heuristic] = None,
) -> int:
    """
    简化接口：仅返回最小总代价。
    """
    return find_min_cost_with_info(grid, start, goal, heuristic=heuristic).cost


def find_min_cost_with_info(
    grid: CostGrid,
    start: Coord,
    goal: Coord,
    heuristic: Optional[Heuristic] = None,
) -> SearchResult:
    """
    在 grid 上做 A* 搜索，返回最小代价及搜索统计。

    搜索状态（best_cost / best_parent / frontier）全部为本次调用私有，
    以 row * width + col 为下标的扁平列表存储，返回时即丢弃。
    frontier 允许同一格重复入队，出队时若 g 与当前 best_cost 不一致则视为过期跳过。

    Raises:
        OutOfBoundsError: start 或 goal 不在网格内
        UnreachableError: frontier 耗尽仍未取出 goal
    """
    if heuristic is None:
        heuristic = manhattan_heuristic

    if not grid.in_bounds(start):
        raise OutOfBoundsError("start outside grid", f"start={tuple(start)}, shape={grid.shape()}")
    if not grid.in_bounds(goal):
        raise OutOfBoundsError("goal outside grid", f"goal={tuple(goal)}, shape={grid.shape()}")

    width = grid.width
    n_cells = width * grid.height
    # 热循环只读扁平的 Python int 列表
    cell_cost: list[int] = grid.cost.ravel().tolist()

    start = (int(start[0]), int(start[1]))
    goal = (int(goal[0]), int(goal[1]))
    start_idx = start[1] * width + start[0]
    goal_idx = goal[1] * width + goal[0]

    inf = float("inf")
    best_cost: list[float] = [inf] * n_cells
    best_parent: list[int] = [_UNSET] * n_cells

    # 条目为 (f, g, idx)
    frontier: list[tuple[int, int, int]] = []
    best_cost[start_idx] = 0
    heapq.heappush(frontier, (heuristic(start, goal), 0, start_idx))

    expanded = 0
    pushed = 1

    while frontier:
        _, g_cur, cur_idx = heapq.heappop(frontier)

        if g_cur != best_cost[cur_idx]:
            continue

        if cur_idx == goal_idx:
            cost = _reconstruct_cost(cell_cost, best_parent, goal_idx, start_idx)
            logger.debug(
                "[ASTAR] goal %s reached: cost=%d expanded=%d pushed=%d",
                goal, cost, expanded, pushed,
            )
            return SearchResult(cost, expanded, pushed, heuristic_name(heuristic))

        expanded += 1
        current = (cur_idx % width, cur_idx // width)

        for nb in grid.neighbors(current):
            nb_idx = nb[1] * width + nb[0]
            candidate = g_cur + cell_cost[nb_idx]
            if candidate < best_cost[nb_idx]:
                best_cost[nb_idx] = candidate
                best_parent[nb_idx] = cur_idx
                heapq.heappush(frontier, (candidate + heuristic(nb, goal), candidate, nb_idx))
                pushed += 1

    raise UnreachableError(
        "no path between start and goal",
        f"start={start}, goal={goal}, expanded={expanded}",
    )


def _reconstruct_cost(
    cell_cost: list[int],
    best_parent: list[int],
    goal_idx: int,
    start_idx: int,
) -> int:
    """沿 best_parent 从 goal 回溯到 start，累加经过格子的代价（起点不计）。"""
    total = 0
    node = goal_idx
    while node != start_idx:
        total += cell_cost[node]
        node = best_parent[node]
    return total


__all__ = ["SearchResult", "find_min_cost", "find_min_cost_with_info"]
