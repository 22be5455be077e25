"""Command line interface for the Function Grapher plugin."""

from __future__ import annotations

import argparse
import json
from typing import Any

from common.angle_mode import AngleMode

from .core import DEFAULT_STEPS, DEFAULT_SURFACE, DEFAULT_TICKS, MAX_STEPS, Surface, plot_function


def _print(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _bounded_int(minimum: int, maximum: int):
    def parse(text: str) -> int:
        try:
            value = int(text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"expected an integer, got '{text}'") from exc
        if value < minimum or value > maximum:
            raise argparse.ArgumentTypeError(f"must be between {minimum} and {maximum}")
        return value

    return parse


def command_plot(args: argparse.Namespace) -> None:
    try:
        surface = Surface(width=args.width, height=args.height, margin=args.margin)
        result = plot_function(
            args.expression,
            args.x_min,
            args.x_max,
            args.y_min,
            args.y_max,
            AngleMode.parse(args.angle_mode),
            steps=args.steps,
            surface=surface,
            tick_count=args.ticks,
        )
    except ValueError as exc:  # expression, range and surface errors all derive from it
        raise SystemExit(f"error: {exc}") from exc
    payload = result.to_dict()
    if not args.pixels:
        payload.pop("pixels")
        payload.pop("path")
    _print(payload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Function Grapher CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    plot_parser = subparsers.add_parser("plot", help="Sample a function and lay out its plot")
    plot_parser.add_argument("expression", help="Function of x, e.g. 'x^2 + 3*sin(x)'")
    plot_parser.add_argument("--x-min", dest="x_min", required=True, help="Domain lower bound")
    plot_parser.add_argument("--x-max", dest="x_max", required=True, help="Domain upper bound")
    plot_parser.add_argument("--y-min", dest="y_min", default=None, help="Optional range lower bound")
    plot_parser.add_argument("--y-max", dest="y_max", default=None, help="Optional range upper bound")
    plot_parser.add_argument(
        "--angle-mode",
        dest="angle_mode",
        default=AngleMode.DEGREES.value,
        choices=[mode.value for mode in AngleMode],
        help="How trigonometric arguments are read",
    )
    plot_parser.add_argument(
        "--steps", type=_bounded_int(1, MAX_STEPS), default=DEFAULT_STEPS, help="Number of sub-intervals"
    )
    plot_parser.add_argument("--ticks", type=_bounded_int(1, 50), default=DEFAULT_TICKS, help="Grid intervals per axis")
    plot_parser.add_argument("--width", type=float, default=DEFAULT_SURFACE.width)
    plot_parser.add_argument("--height", type=float, default=DEFAULT_SURFACE.height)
    plot_parser.add_argument("--margin", type=float, default=DEFAULT_SURFACE.margin)
    plot_parser.add_argument("--pixels", action="store_true", help="Include mapped pixels and SVG path")
    plot_parser.set_defaults(func=command_plot)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
