"""Shared helpers for biohello visualizations."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .. import __version__ as BIOHELLO_VERSION

RC = {
    "figure.dpi": 120,
    "savefig.dpi": 120,
    "font.size": 10,
}


@dataclass(frozen=True)
class VizSpec:
    kind: str
    meta: Dict[str, Any]
    primitives: Dict[str, Any]
    spec_version: str = "1.0"

    def to_json(self) -> str:
        return json.dumps(asdict(self), sort_keys=True, separators=(",", ":"))


def finalize(
    fig: plt.Figure,
    spec: VizSpec,
    save: Optional[str] = None,
    save_viz_spec: Optional[str] = None,
) -> Tuple[plt.Figure, Dict[str, Any]]:
    """Stamp the footer, then write the image and its JSON spec when asked."""
    fig.text(0.01, 0.01, f"biohello {BIOHELLO_VERSION} • {spec.kind}", fontsize=8, color="#555555")
    if save:
        fig.savefig(save, bbox_inches="tight", facecolor="white")
    if save_viz_spec:
        with open(save_viz_spec, "w", encoding="utf-8") as handle:
            handle.write(spec.to_json())
    return fig, asdict(spec)
