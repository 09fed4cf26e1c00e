"""Command-line interface."""
import argparse
import json
import logging
import sys

import numpy as np

from .config import DEFAULT_EPSILON, DEFAULT_PARAMS, DEFAULT_SEGMENTS
from .errors import InvalidParameterError
from .geometry import analyze, snap_to_circular
from .logging_config import setup_logging
from .models import EllipsoidParams, SectionAnalysis, SectionStatus

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ellipsoid-sections",
        description="Circular sections of an ellipsoid through its X-axis",
    )
    ap.add_argument("--a", type=float, default=DEFAULT_PARAMS.a, help="Semi-axis along X")
    ap.add_argument("--b", type=float, default=DEFAULT_PARAMS.b, help="Semi-axis along Y")
    ap.add_argument("--c", type=float, default=DEFAULT_PARAMS.c, help="Semi-axis along Z")
    ap.add_argument("--theta", type=float, default=DEFAULT_PARAMS.theta_degrees,
                    help="Plane angle about X, in degrees")
    ap.add_argument("--segments", type=int, default=DEFAULT_SEGMENTS)
    ap.add_argument("--epsilon", type=float, default=DEFAULT_EPSILON,
                    help="Circularity tolerance on |a - b_int|")
    ap.add_argument("--snap", action="store_true",
                    help="Replace theta by the circular-section angle when one exists")
    ap.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    ap.add_argument("--points", action="store_true", help="Include curve points in JSON output")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def format_report(result: SectionAnalysis) -> str:
    """Human-readable summary of one analysis."""
    p = result.params
    lines = [
        f"Ellipsoid a={p.a:g}, b={p.b:g}, c={p.c:g}; plane at {p.theta_degrees:.2f}°",
        f"Circular section possible: {'yes' if result.feasible else 'no'}",
    ]
    target = result.target
    if target.status is SectionStatus.FOUND:
        lines.append(f"Target angle: θ ≈ ±{target.degrees:.2f}° (and 180° ∓ θ)")
    elif target.status is SectionStatus.DEGENERATE:
        lines.append("Target angle: none, b == c makes every section congruent")
    else:
        lines.append("Target angle: no real solution")
    lines.append(
        f"Section semi-axes: a_int={result.ellipse.semi_axis_u:.4f}, "
        f"b_int={result.ellipse.semi_axis_v:.4f}"
    )
    lines.append(f"Section is circular: {'yes' if result.circular else 'no'}")
    if not result.feasible:
        lines.append("Hint: a circular section through X needs a between b and c.")
    return "\n".join(lines)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    try:
        params = EllipsoidParams(
            a=args.a, b=args.b, c=args.c, theta=float(np.radians(args.theta))
        )
        if args.snap:
            params = snap_to_circular(params)
        result = analyze(params, segments=args.segments, epsilon=args.epsilon)
    except InvalidParameterError as exc:
        logger.error("%s", exc)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(include_points=args.points), indent=2))
    else:
        print(format_report(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
