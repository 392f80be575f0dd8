from .config import (
    LineConfig,
    LineConfigError,
    build_linear_map,
    build_linear_maps,
    load_line_configs,
    load_line_configs_from_env,
    parse_line_configs,
)
from .line import EPSILON, LinearMap, Point, clamp_output

__all__ = [
    "EPSILON",
    "LineConfig",
    "LineConfigError",
    "LinearMap",
    "Point",
    "build_linear_map",
    "build_linear_maps",
    "clamp_output",
    "load_line_configs",
    "load_line_configs_from_env",
    "parse_line_configs",
]
