from __future__ import annotations

from pathlib import Path

from ._util import safe_filename


def output_root(output_dir: str = "figures") -> Path:
    """
    Root directory for rendered figures.
    Relative paths resolve against the current working directory.
    """
    p = Path(output_dir)
    return p if p.is_absolute() else Path.cwd() / p


def figure_path(output_dir: str, figure_id: int, title: str, image_format: str = "png") -> Path:
    stem = safe_filename(f"figure_s{figure_id:02d}_{title.split(':', 1)[-1].strip().lower()}")
    return output_root(output_dir) / f"{stem}.{image_format}"
