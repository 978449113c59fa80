from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class GridRouteError(Exception):
    """Business-level exception carrying a stable error code for callers."""

    code: str
    message: str
    detail: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.__str__())

    def __str__(self) -> str:  # pragma: no cover - trivial
        base = f"[{self.code}] {self.message}"
        if self.detail:
            return f"{base}: {self.detail}"
        return base

    def to_dict(self) -> dict[str, Optional[str]]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


class MalformedInputError(GridRouteError):
    """Grid text is ragged, empty, or holds a character outside 1-9."""

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        super().__init__("MALFORMED_INPUT", message, detail)


class EmptyGridError(GridRouteError):
    """Expansion was requested on a grid with no cells."""

    def __init__(self, message: str = "grid has no cells", detail: Optional[str] = None) -> None:
        super().__init__("EMPTY_GRID", message, detail)


class OutOfBoundsError(GridRouteError):
    """A coordinate falls outside the grid extent."""

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        super().__init__("OUT_OF_BOUNDS", message, detail)


class UnreachableError(GridRouteError):
    """The frontier was exhausted before the goal was extracted."""

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        super().__init__("UNREACHABLE", message, detail)


__all__ = [
    "GridRouteError",
    "MalformedInputError",
    "EmptyGridError",
    "OutOfBoundsError",
    "UnreachableError",
]
