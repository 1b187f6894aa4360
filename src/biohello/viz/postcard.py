"""Postcard rendering: an encoded message drawn as a double helix."""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np

from ..standard import complement
from ._utils import RC, VizSpec, finalize, plt

BASES_PER_TURN = 10
BASE_COLORS = {"a": "#2ca02c", "c": "#1f77b4", "g": "#ff7f0e", "t": "#d62728", "n": "#7f7f7f"}


def helix_coordinates(length: int, bases_per_turn: int = BASES_PER_TURN) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """x positions and the y values of both strands, one sample per base."""

    x = np.arange(length, dtype=float)
    phase = 2.0 * np.pi * x / bases_per_turn
    return x, np.sin(phase), np.sin(phase + np.pi)


def render_postcard(
    sequence: str,
    message: str,
    *,
    save: Optional[str] = None,
    save_viz_spec: Optional[str] = None,
) -> Tuple[plt.Figure, Dict[str, Any]]:
    if not sequence:
        raise ValueError("Cannot draw a postcard for an empty sequence.")
    plt.rcParams.update(RC)
    sequence = sequence.lower()
    paired = complement(sequence)
    x, top, bottom = helix_coordinates(len(sequence))
    smooth_x = np.linspace(0, max(len(sequence) - 1, 1), max(len(sequence) * 12, 24))
    smooth_phase = 2.0 * np.pi * smooth_x / BASES_PER_TURN

    width = min(max(len(sequence) * 0.25, 4.0), 18.0)
    fig, ax = plt.subplots(figsize=(width, 3.2))
    ax.plot(smooth_x, np.sin(smooth_phase), color="#444444", linewidth=2.0)
    ax.plot(smooth_x, np.sin(smooth_phase + np.pi), color="#888888", linewidth=2.0)
    for idx, (base, pair) in enumerate(zip(sequence, paired)):
        ax.plot([x[idx], x[idx]], [top[idx], bottom[idx]], color="#cccccc", linewidth=1.0, zorder=1)
        ax.text(x[idx], top[idx] + 0.18, base.upper(), ha="center", va="bottom", fontsize=7,
                color=BASE_COLORS.get(base, BASE_COLORS["n"]))
        ax.text(x[idx], bottom[idx] - 0.18, pair.upper(), ha="center", va="top", fontsize=7,
                color=BASE_COLORS.get(pair, BASE_COLORS["n"]))
    ax.set_title(message.replace("*", " "), fontsize=14)
    ax.set_xlim(-1, len(sequence))
    ax.set_ylim(-1.8, 1.8)
    ax.axis("off")

    spec = VizSpec(
        kind="postcard",
        meta={"message": message, "bases": len(sequence), "bases_per_turn": BASES_PER_TURN},
        primitives={"sequence": sequence, "complement": paired},
    )
    return finalize(fig, spec, save=save, save_viz_spec=save_viz_spec)


__all__ = ["render_postcard", "helix_coordinates"]
