from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "SUPPFIG_"


class SettingsError(ValueError):
    """Raised when a SUPPFIG_* environment variable cannot be parsed."""


class GallerySettings(BaseModel):
    """
    Runtime settings for the CLI and the viewer.

    seed: fixed seed for reproducible datasets; None draws fresh data every time
    output_dir: where rendered images are written (relative to the working dir)
    dpi / image_format: passed to matplotlib when saving
    log_level: level name for the package logger
    """
    seed: Optional[int] = None
    output_dir: str = "figures"
    dpi: int = Field(default=120, gt=0)
    image_format: str = "png"
    log_level: str = "INFO"


def _read_int(env: Mapping[str, str], key: str) -> Optional[int]:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise SettingsError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}.") from e


def load_settings(env: Optional[Mapping[str, str]] = None) -> GallerySettings:
    """Build settings from SUPPFIG_* environment variables, falling back to defaults."""
    env = os.environ if env is None else env
    values: dict[str, object] = {}

    seed = _read_int(env, "SEED")
    if seed is not None:
        values["seed"] = seed
    dpi = _read_int(env, "DPI")
    if dpi is not None:
        if dpi <= 0:
            raise SettingsError(f"{ENV_PREFIX}DPI must be positive, got {dpi}.")
        values["dpi"] = dpi

    for key, field in (("OUTPUT_DIR", "output_dir"), ("IMAGE_FORMAT", "image_format"), ("LOG_LEVEL", "log_level")):
        raw = env.get(ENV_PREFIX + key)
        if raw and raw.strip():
            values[field] = raw.strip()

    if "image_format" in values:
        values["image_format"] = str(values["image_format"]).lower().lstrip(".")
    if "log_level" in values:
        values["log_level"] = str(values["log_level"]).upper()

    return GallerySettings(**values)
