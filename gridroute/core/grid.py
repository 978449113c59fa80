"""
代价网格模块。

提供不可变的二维代价网格（每格代价 1~9）、文本解析、四邻接查询，
以及 5×5 平铺扩展。坐标约定为 (x, y) = (列, 行)，从 0 开始。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..exceptions import EmptyGridError, MalformedInputError, OutOfBoundsError

logger = logging.getLogger(__name__)

Coord = tuple[int, int]  # (x, y) = (col, row)

MIN_COST = 1
MAX_COST = 9
DEFAULT_TILE_FACTOR = 5

_VALID_DIGITS = frozenset("123456789")

EXAMPLE_ROWS: tuple[str, ...] = (
    "1163751742",
    "1381373672",
    "2136511328",
    "3694931569",
    "7463417111",
    "1319128137",
    "1359912421",
    "3125421639",
    "1293138521",
    "2311944581",
)


@dataclass(frozen=True, eq=False)
class CostGrid:
    """2D 代价网格，cost[row, col] 为进入该格的代价。"""

    cost: np.ndarray  # 2D, shape (height, width), uint8

    def __post_init__(self) -> None:
        arr = np.asarray(self.cost)
        if arr.ndim != 2:
            raise MalformedInputError("cost grid must be 2-D", f"got ndim={arr.ndim}")
        if arr.size > 0:
            if not np.issubdtype(arr.dtype, np.integer):
                raise MalformedInputError("cell costs must be integers", f"got dtype={arr.dtype}")
            lo, hi = int(arr.min()), int(arr.max())
            if lo < MIN_COST or hi > MAX_COST:
                raise MalformedInputError(
                    "cell cost out of range",
                    f"expected [{MIN_COST}, {MAX_COST}], got [{lo}, {hi}]",
                )
        # 复制一份并设为只读，外部数组后续修改不会影响网格
        arr = np.array(arr, dtype=np.uint8, copy=True)
        arr.setflags(write=False)
        object.__setattr__(self, "cost", arr)

    @property
    def height(self) -> int:
        return int(self.cost.shape[0])

    @property
    def width(self) -> int:
        return int(self.cost.shape[1])

    def shape(self) -> tuple[int, int]:
        """返回网格形状 (height, width)。"""
        return self.height, self.width

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def cost_at(self, coord: Coord) -> int:
        """返回进入 coord 的代价；越界时抛出 OutOfBoundsError。"""
        if not self.in_bounds(coord):
            raise OutOfBoundsError(
                "coordinate outside grid",
                f"coord={tuple(coord)}, width={self.width}, height={self.height}",
            )
        x, y = coord
        return int(self.cost[y, x])

    def neighbors(self, coord: Coord) -> list[Coord]:
        """
        返回 coord 上、下、左、右四个方向中位于网格内的邻居。

        顺序固定为 上 → 下 → 左 → 右，只影响平局时的搜索顺序，不影响结果。
        """
        x, y = coord
        out: list[Coord] = []
        if y > 0:
            out.append((x, y - 1))
        if y < self.height - 1:
            out.append((x, y + 1))
        if x > 0:
            out.append((x - 1, y))
        if x < self.width - 1:
            out.append((x + 1, y))
        return out

    def expand(self, factor: int = DEFAULT_TILE_FACTOR) -> "CostGrid":
        return expand_grid(self, factor=factor)

    def to_rows(self) -> list[str]:
        """转换回文本行，便于调试与写文件。"""
        return ["".join(str(int(v)) for v in row) for row in self.cost]


def parse_cost_grid(lines: Iterable[str]) -> CostGrid:
    """
    将文本行解析为 CostGrid。

    每一行独立解析为单个数字序列：
      - 任意字符不是 ASCII '1'~'9' → MalformedInputError（包括 '0'）；
      - 行长度不一致 → MalformedInputError；
      - 没有任何行 → MalformedInputError。

    每行尾部的换行符会被去掉，输入末尾的空行会被忽略。
    """
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and rows[-1] == "":
        rows.pop()

    if not rows:
        raise MalformedInputError("grid input has no rows")

    width = len(rows[0])
    parsed: list[list[int]] = []
    for row_idx, row in enumerate(rows):
        if len(row) != width:
            raise MalformedInputError(
                "ragged grid rows",
                f"row {row_idx} has length {len(row)}, expected {width}",
            )
        for col_idx, ch in enumerate(row):
            if ch not in _VALID_DIGITS:
                raise MalformedInputError(
                    "invalid cost character",
                    f"{ch!r} at row {row_idx}, col {col_idx}",
                )
        parsed.append([ord(ch) - ord("0") for ch in row])

    grid = CostGrid(cost=np.array(parsed, dtype=np.uint8))
    logger.debug("[GRID] parsed cost grid, shape=%s", grid.shape())
    return grid


def wrap_cost(values: np.ndarray | int) -> np.ndarray | int:
    """将代价循环折回 1..9：wrap(v) = ((v - 1) mod 9) + 1。"""
    return (values - 1) % MAX_COST + 1


def expand_grid(grid: CostGrid, factor: int = DEFAULT_TILE_FACTOR) -> CostGrid:
    """
    将网格按 factor×factor 平铺扩展。

    副本偏移 (tx, ty) 处，局部坐标 (x, y) 的代价为
    wrap(original[y, x] + tx + ty)，横向与纵向增量先相加再折回。

    Args:
        grid: 原始网格（不能为空）
        factor: 每个方向的副本数，默认 5

    Returns:
        新的 CostGrid，形状为 (factor*height, factor*width)
    """
    if factor < 1:
        raise ValueError(f"tile factor must be >= 1, got {factor}")
    if grid.cost.size == 0:
        raise EmptyGridError("cannot expand an empty grid", f"shape={grid.shape()}")

    base = grid.cost.astype(np.int64)
    ny, nx = base.shape
    # increments[ty, tx] = ty + tx
    increments = np.add.outer(np.arange(factor), np.arange(factor))
    # tiled[ty, y, tx, x] = base[y, x] + ty + tx
    tiled = base[None, :, None, :] + increments[:, None, :, None]
    tiled = tiled.reshape(factor * ny, factor * nx)

    expanded = CostGrid(cost=wrap_cost(tiled).astype(np.uint8))
    logger.debug("[GRID] expanded %s -> %s (factor=%d)", grid.shape(), expanded.shape(), factor)
    return expanded


def make_example_grid() -> CostGrid:
    """返回 10×10 示例网格，用于 demo / 测试。"""
    return parse_cost_grid(EXAMPLE_ROWS)


__all__ = [
    "Coord",
    "CostGrid",
    "MIN_COST",
    "MAX_COST",
    "DEFAULT_TILE_FACTOR",
    "EXAMPLE_ROWS",
    "parse_cost_grid",
    "wrap_cost",
    "expand_grid",
    "make_example_grid",
]
