from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .line import LinearMap, Point

_LINE_NAME_RE = re.compile(r"^[a-z][a-z0-9_]{0,63}$")
_MAPPING_ORIGIN = "<mapping>"


class LineConfigError(ValueError):
    """Invalid line configuration."""


@dataclass(frozen=True)
class LineConfig:
    name: str
    p1: Point
    p2: Point
    min_output: float
    max_output: float


def load_line_configs_from_env() -> dict[str, LineConfig]:
    config_path = os.getenv("LINEMAP_CONFIG_PATH")
    if not config_path or not config_path.strip():
        return {}
    return load_line_configs(Path(config_path.strip()))


def load_line_configs(path: Path) -> dict[str, LineConfig]:
    path = path.expanduser()
    if not path.exists():
        raise LineConfigError(f"line config does not exist: {path}")
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise LineConfigError(f"failed to parse line config at {path}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise LineConfigError(f"line config at {path} must be a YAML object")
    return parse_line_configs(loaded, origin=str(path))


def parse_line_configs(raw: Mapping[str, Any], *, origin: str = _MAPPING_ORIGIN) -> dict[str, LineConfig]:
    """Validate the shape of a ``lines`` document.

    Only structure and types are checked. Coincident points and inverted output
    ranges pass through untouched; ``LinearMap.configure`` decides what they mean.
    """

    raw_lines = raw.get("lines")
    if raw_lines is None:
        return {}
    if not isinstance(raw_lines, dict):
        raise LineConfigError(f"{origin}: 'lines' must be an object")

    lines: dict[str, LineConfig] = {}
    for name, value in raw_lines.items():
        if not isinstance(name, str) or not _LINE_NAME_RE.fullmatch(name):
            raise LineConfigError(f"{origin}: invalid line name '{name}'")
        if not isinstance(value, dict):
            raise LineConfigError(f"{origin}: lines.{name} must be an object")
        lines[name] = _parse_line(name, value, origin=origin)
    return lines


def build_linear_map(config: LineConfig) -> LinearMap:
    return LinearMap.from_points(config.p1, config.p2, config.min_output, config.max_output)


def build_linear_maps(configs: Mapping[str, LineConfig]) -> dict[str, LinearMap]:
    return {name: build_linear_map(cfg) for name, cfg in configs.items()}


def _parse_line(name: str, raw: Mapping[str, Any], *, origin: str) -> LineConfig:
    path = f"{origin}: lines.{name}"

    raw_points = raw.get("points")
    if not isinstance(raw_points, list) or len(raw_points) != 2:
        raise LineConfigError(f"{path}.points must be a list of two [x, y] pairs")
    p1 = _parse_point(raw_points[0], path=f"{path}.points[0]")
    p2 = _parse_point(raw_points[1], path=f"{path}.points[1]")

    min_output, max_output = _parse_pair(raw.get("output"), path=f"{path}.output")

    return LineConfig(name=name, p1=p1, p2=p2, min_output=min_output, max_output=max_output)


def _parse_point(value: Any, *, path: str) -> Point:
    return Point.from_pair(_parse_pair(value, path=path))


def _parse_pair(value: Any, *, path: str) -> tuple[float, float]:
    if not isinstance(value, list) or len(value) != 2:
        raise LineConfigError(f"{path} must be a 2-element list")
    left = _as_float(value[0], message=f"{path}[0] must be numeric")
    right = _as_float(value[1], message=f"{path}[1] must be numeric")
    return left, right


def _as_float(value: Any, *, message: str) -> float:
    if isinstance(value, bool):
        raise LineConfigError(message)
    if isinstance(value, (int, float)):
        return float(value)
    raise LineConfigError(message)
