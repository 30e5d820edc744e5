#!/usr/bin/env python3
"""Command-line interface for shape fitting.

Usage:
    shapefit fit stroke.json
    shapefit fit stroke.json --all --render canvas.png
    shapefit bench ackley --dim 3 --start -2.1 -3.04 4.5 --debug

The stroke file holds a JSON list of [x, y] pairs, or an object with a
"path" key containing that list. Results are printed as JSON.

Or run via the main module:
    python -m shapefit fit stroke.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

from .config import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, OptimizerConfig, configure_logging
from .domain.geometry import as_path
from .drawing import DrawnShape
from .fitting.recognizer import create_default_recognizer
from .optimization.benchmarks import BENCHMARKS
from .optimization.optimizer import minimize

logger = logging.getLogger(__name__)


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='shapefit',
        description='Fit lines, circles and rectangles to freehand paths'
    )
    parser.add_argument('--log-level', default='WARNING',
                        help='Logging level (default: WARNING)')
    sub = parser.add_subparsers(dest='command', required=True)

    fit = sub.add_parser('fit', help='Recognize the shape of a drawn path')
    fit.add_argument('path', type=str, help='JSON file with a list of [x, y] points')
    fit.add_argument('--all', action='store_true',
                     help='Also report every fitter result, not just the winner')
    fit.add_argument('--render', type=str, default=None,
                     help='Write a PNG of the path and the recognized shape')
    fit.add_argument('--size', type=int, nargs=2, default=(640, 480),
                     metavar=('W', 'H'), help='Canvas size for --render')

    bench = sub.add_parser('bench', help='Minimize a benchmark function')
    bench.add_argument('function', choices=sorted(BENCHMARKS))
    bench.add_argument('--dim', type=int, default=2, help='Number of variables')
    bench.add_argument('--start', type=float, nargs='+', default=None,
                       help='Initial guess (default: 1.5 in every dimension)')
    bench.add_argument('--max-iterations', type=int, default=DEFAULT_MAX_ITERATIONS)
    bench.add_argument('--tolerance', type=float, default=DEFAULT_TOLERANCE)
    bench.add_argument('--debug', action='store_true',
                       help='Log the operation chosen every iteration')
    return parser


def load_path(filename: str) -> np.ndarray:
    """Load an Nx2 path from a JSON file.

    Raises:
        ValueError: If the file content is not a list of [x, y] pairs.
    """
    data = json.loads(Path(filename).read_text())
    if isinstance(data, dict):
        data = data.get('path')
    if not isinstance(data, list):
        raise ValueError("expected a list of [x, y] points or an object with a 'path' key")
    return as_path(data)


def _fit_command(args) -> int:
    try:
        path = load_path(args.path)
    except (OSError, ValueError) as e:
        logger.error("Failed to read %s: %s", args.path, e)
        return 2

    recognizer = create_default_recognizer()
    fit = recognizer.recognize(path)
    shape = DrawnShape(path=path, fit=fit)

    output = {'recognized': shape.to_dict()}
    if args.all:
        output['candidates'] = [r.to_dict() for r in recognizer.fit_all(path)]
    print(json.dumps(output, indent=2))

    if args.render:
        from .utils.rendering import render_canvas
        render_canvas([shape], size=tuple(args.size)).save(args.render)
        logger.info("Saved rendering to %s", args.render)
    return 0


def _bench_command(args) -> int:
    start = args.start if args.start is not None else [1.5] * args.dim
    config = OptimizerConfig(max_iterations=args.max_iterations,
                             tolerance=args.tolerance, debug=args.debug)
    result = minimize(start, BENCHMARKS[args.function], config)
    print(json.dumps(result.to_dict(), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the requested command."""
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    level = args.log_level
    if getattr(args, 'debug', False):
        level = 'DEBUG'
    configure_logging(level=level)

    if args.command == 'fit':
        return _fit_command(args)
    return _bench_command(args)


if __name__ == '__main__':
    sys.exit(main())
