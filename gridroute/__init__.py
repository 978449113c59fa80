"""gridroute package initialisation helpers."""

from __future__ import annotations

from .settings import settings  # noqa: F401

__all__ = ["settings"]
