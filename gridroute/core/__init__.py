"""
gridroute core module.

包含代价网格、启发函数、A* 求解器与角到角求解入口。
"""

__all__ = ["grid", "heuristics", "astar", "puzzle"]
