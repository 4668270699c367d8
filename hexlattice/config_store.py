"""Helpers for loading and saving grid configuration.

The configuration lives in the per-user configuration directory reported
by ``platformdirs.user_config_dir`` so that installed copies of the
library never write into their own package tree. Writes go to a
temporary sibling file which then replaces the target, so a crash during
a save leaves the previous file intact.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_dir

from .config import GridConfig

CONFIG_FILENAME = "grid.json"


def default_config_path() -> Path:
    """Return the default location of the grid configuration file.

    The directory is not created here; :func:`save_grid_config` creates it
    on demand.
    """
    return Path(user_config_dir("hexlattice")) / CONFIG_FILENAME


def load_grid_config(path: Path | None = None) -> GridConfig:
    """Load a :class:`GridConfig` from ``path``.

    A missing file yields the default configuration. Malformed contents
    raise :class:`pydantic.ValidationError`.
    """
    path = path or default_config_path()
    if not path.exists():
        return GridConfig()
    return GridConfig.model_validate_json(path.read_text(encoding="utf-8"))


def save_grid_config(config: GridConfig, path: Path | None = None) -> Path:
    """Persist ``config`` atomically and return the path written."""
    path = path or default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(path.suffix + ".tmp")
    temp_path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
    temp_path.replace(path)
    return path
