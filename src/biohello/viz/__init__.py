"""Visualization helpers for biohello (plots live here to isolate dependencies)."""
from __future__ import annotations

from .postcard import helix_coordinates, render_postcard

__all__ = ["render_postcard", "helix_coordinates"]
