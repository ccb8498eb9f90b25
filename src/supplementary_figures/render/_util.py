from __future__ import annotations

from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt


def save_matplotlib(fig: Any, path: Path, *, dpi: int = 120) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, bbox_inches="tight", dpi=dpi)
    plt.close(fig)
    return path


def tick_rotation(labels: list[str]) -> tuple[int, str]:
    """Rotate category ticks only when the labels would collide."""
    longest = max((len(str(s)) for s in labels), default=0)
    if longest * len(labels) > 60:
        return 40, "right"
    return 0, "center"
