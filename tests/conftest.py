from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure(config):
    # 确保本仓库根目录排在 sys.path 最前（logging_config 是根目录模块）
    if str(PROJECT_ROOT) in sys.path:
        sys.path.remove(str(PROJECT_ROOT))
    sys.path.insert(0, str(PROJECT_ROOT))

    # 若 gridroute 已从别处导入，踢掉让其重新从本仓库加载
    mod = sys.modules.get("gridroute")
    if mod is not None:
        f = getattr(mod, "__file__", "") or ""
        if f and str(PROJECT_ROOT).lower() not in f.lower():
            sys.modules.pop("gridroute", None)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20211215)


def bellman_ford_min_cost(cost: np.ndarray, start: tuple[int, int], goal: tuple[int, int]) -> int:
    """
    独立的参照实现：向量化 Bellman-Ford 松弛，直到不再变化。

    dist[y, x] = 从 start 到 (x, y) 的最小代价（起点不计）。
    """
    cost = cost.astype(np.int64)
    ny, nx = cost.shape
    big = np.iinfo(np.int64).max // 4
    dist = np.full((ny, nx), big, dtype=np.int64)
    sx, sy = start
    dist[sy, sx] = 0
    while True:
        cand = dist.copy()
        cand[1:, :] = np.minimum(cand[1:, :], dist[:-1, :] + cost[1:, :])
        cand[:-1, :] = np.minimum(cand[:-1, :], dist[1:, :] + cost[:-1, :])
        cand[:, 1:] = np.minimum(cand[:, 1:], dist[:, :-1] + cost[:, 1:])
        cand[:, :-1] = np.minimum(cand[:, :-1], dist[:, 1:] + cost[:, :-1])
        if np.array_equal(cand, dist):
            break
        dist = cand
    gx, gy = goal
    return int(dist[gy, gx])


@pytest.fixture
def min_cost_oracle():
    return bellman_ford_min_cost
