"""
Render configuration.

A YAML file holds any subset of the RenderConfig fields; missing keys keep
their defaults:

    shader: root
    params: {n: 5, k: 0}
    xmin: -2.0
    ...
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass
class RenderConfig:
    shader: Optional[str] = "identity"  # single-step shader name, or None to use `map`
    map: Optional[str] = None  # escape-time map name ("quadratic", "power", "exp", "log")
    c: str = "0+0j"
    params: Dict[str, Any] = field(default_factory=dict)
    xmin: float = -2.0
    xmax: float = 2.0
    ymin: float = -2.0
    ymax: float = 2.0
    width: int = 512
    height: int = 512
    max_iter: int = 200
    escape_radius: float = 10.0
    color_mode: str = "auto"
    cmap: Optional[str] = None


def config_from_dict(cfg: Dict[str, Any]) -> RenderConfig:
    defaults = RenderConfig()
    shader = cfg.get("shader", defaults.shader)
    map_name = cfg.get("map", defaults.map)
    if map_name is not None and "shader" not in cfg:
        shader = None

    cmap = cfg.get("cmap", defaults.cmap)
    return RenderConfig(
        shader=shader,
        map=map_name,
        c=str(cfg.get("c", defaults.c)),
        params=dict(cfg.get("params") or {}),
        xmin=float(cfg.get("xmin", defaults.xmin)),
        xmax=float(cfg.get("xmax", defaults.xmax)),
        ymin=float(cfg.get("ymin", defaults.ymin)),
        ymax=float(cfg.get("ymax", defaults.ymax)),
        width=int(cfg.get("width", defaults.width)),
        height=int(cfg.get("height", defaults.height)),
        max_iter=int(cfg.get("max_iter", defaults.max_iter)),
        escape_radius=float(cfg.get("escape_radius", defaults.escape_radius)),
        color_mode=str(cfg.get("color_mode", defaults.color_mode)),
        cmap=None if cmap is None else str(cmap),
    )


def load_config(path: str | Path) -> RenderConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        cfg = yaml.safe_load(f) or {}

    return config_from_dict(cfg)
