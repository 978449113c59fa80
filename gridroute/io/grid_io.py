from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..core.grid import CostGrid, parse_cost_grid
from ..settings import settings


def read_grid_lines(path: str | Path) -> list[str]:
    path_obj = Path(path)
    return path_obj.read_text(encoding="utf-8").splitlines()


def load_cost_grid(path: str | Path) -> CostGrid:
    return parse_cost_grid(read_grid_lines(path))


def resolve_day_input(day: str | int, input_dir: Optional[str | Path] = None) -> Path:
    """<input_dir>/<day>.txt；input_dir 默认取 settings.INPUT_DIR。"""
    base = Path(input_dir) if input_dir is not None else Path(settings.INPUT_DIR)
    return base / f"{str(day).zfill(2)}.txt"


__all__ = ["read_grid_lines", "load_cost_grid", "resolve_day_input"]
