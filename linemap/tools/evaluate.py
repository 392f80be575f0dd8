from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from linemap.config import LineConfigError, build_linear_map, load_line_configs
from linemap.line import LinearMap, Point
from linemap.observability import configure_logging
from linemap.settings import load_settings

logger = logging.getLogger("linemap.tools.evaluate")

_ADHOC_LINE = "adhoc"


def _select_line(*, config_path: str | None, line_name: str | None) -> tuple[str, LinearMap]:
    if not config_path:
        raise SystemExit("no line given: pass --points/--output or --config (or set LINEMAP_CONFIG_PATH)")

    try:
        configs = load_line_configs(Path(config_path))
    except LineConfigError as exc:
        raise SystemExit(str(exc)) from exc

    if line_name is None:
        if len(configs) != 1:
            names = ", ".join(sorted(configs)) or "none"
            raise SystemExit(f"--line is required when the config does not define exactly one line (defined: {names})")
        line_name = next(iter(configs))

    config = configs.get(line_name)
    if config is None:
        raise SystemExit(f"line '{line_name}' is not defined in {config_path}")
    return line_name, build_linear_map(config)


def main() -> None:
    parser = argparse.ArgumentParser(description="Evaluate inputs against a clamped two-point line")
    parser.add_argument("x", nargs="+", type=float, help="input value(s) to evaluate")
    parser.add_argument("--config", default=None, help="path to line config YAML (default: LINEMAP_CONFIG_PATH)")
    parser.add_argument("--line", default=None, help="name of the line in the config file")
    parser.add_argument(
        "--points",
        nargs=4,
        type=float,
        metavar=("X1", "Y1", "X2", "Y2"),
        default=None,
        help="define an ad hoc line through (X1, Y1) and (X2, Y2)",
    )
    parser.add_argument(
        "--output",
        nargs=2,
        type=float,
        metavar=("MIN", "MAX"),
        default=None,
        help="output clamp range for an ad hoc line",
    )
    args = parser.parse_args()

    load_dotenv()
    settings = load_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    configure_logging(level=level, log_format=settings.log_format)

    if (args.points is None) != (args.output is None):
        raise SystemExit("--points and --output must be given together")
    if args.points is not None and (args.config is not None or args.line is not None):
        raise SystemExit("--points/--output cannot be combined with --config or --line")

    if args.points is not None:
        x1, y1, x2, y2 = args.points
        min_output, max_output = args.output
        name = _ADHOC_LINE
        line = LinearMap.from_points(Point(x1, y1), Point(x2, y2), min_output, max_output)
    else:
        name, line = _select_line(config_path=args.config or settings.config_path, line_name=args.line)

    logger.info("evaluating %d input(s) against line %s", len(args.x), name)

    output = {
        "line": name,
        "slope": line.slope,
        "intercept": line.intercept,
        "is_vertical": line.is_vertical,
        "min_output": line.min_output,
        "max_output": line.max_output,
        "results": [{"x": x, "y": line.evaluate(x)} for x in args.x],
    }
    print(json.dumps(output, sort_keys=True))


if __name__ == "__main__":
    main()
