# pyovoid/cli.py
from __future__ import annotations

import argparse
import logging
import math
from typing import List, Optional

from .analysis import signed_volume
from .export import save_mesh
from .ovoid import DEFAULT_FAMILY, DEFAULT_NB_SAMPLES, generate_ovoid_mesh
from .profile import AXES, CurveFamily, EggCurveFamily, ExpressionFamily, get_family
from .weld import DEFAULT_TOLERANCE

logger = logging.getLogger(__name__)

_DEF_HELP = """
Examples:
  python -m pyovoid
  python -m pyovoid --samples 32 --no-display --out ovoid.obj
  python -m pyovoid --family egg --egg-a 6 --egg-b 4 --egg-d 1 --out egg.stl
  python -m pyovoid --family expr --radius "sin(t)" --height "1.4*cos(t)" --out drop.ply
"""


def _sample_count(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid sample count: {text!r}") from None
    if n <= 2:
        raise argparse.ArgumentTypeError(f"sample count must be > 2 (got {n})")
    return n


def _positive_float(text: str) -> float:
    try:
        x = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if not (math.isfinite(x) and x > 0):
        raise argparse.ArgumentTypeError(f"value must be > 0 (got {text})")
    return x


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pyovoid", description="pyovoid: closed ovoid mesh generator",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("--samples", type=_sample_count, default=DEFAULT_NB_SAMPLES,
                   help=f"samples per half turn, > 2 (default {DEFAULT_NB_SAMPLES})")
    p.add_argument("--family", choices=["arcs", "egg", "expr"], default=DEFAULT_FAMILY)
    p.add_argument("--egg-a", type=float, default=6.0)
    p.add_argument("--egg-b", type=float, default=4.0)
    p.add_argument("--egg-d", type=float, default=1.0)
    p.add_argument("--radius", help="radius(t) expression for --family expr")
    p.add_argument("--height", help="height(t) expression for --family expr")
    p.add_argument("--t-range", type=float, nargs=2, metavar=("T0", "T1"), default=(0.0, math.pi))
    p.add_argument("--axis", choices=AXES, default="z", help="rotation axis for --family expr")
    p.add_argument("--tolerance", type=_positive_float, default=DEFAULT_TOLERANCE,
                   help="vertex welding tolerance")
    p.add_argument("--out", help="Output path (.obj/.stl/.ply). Alternatively use --stl/--ply flags.")
    p.add_argument("--stl", action="store_true", help="Force binary STL output")
    p.add_argument("--ply", action="store_true", help="Force ASCII PLY output")
    p.add_argument("--no-display", dest="display", action="store_false",
                   help="Do not open the wireframe window")
    p.add_argument("-v", "--verbose", action="count", default=0)
    return p


def _family_from_args(p: argparse.ArgumentParser, args: argparse.Namespace) -> CurveFamily:
    if args.family == "egg":
        return EggCurveFamily(a=args.egg_a, b=args.egg_b, d=args.egg_d)
    if args.family == "expr":
        if not (args.radius and args.height):
            p.error("--family expr needs both --radius and --height")
        return ExpressionFamily(args.radius, args.height, tuple(args.t_range), axis=args.axis)
    return get_family(args.family)


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        family = _family_from_args(p, args)
        mesh = generate_ovoid_mesh(args.samples, family, tolerance=args.tolerance)
    except ValueError as exc:  # OvoidError and expression errors
        p.error(str(exc))
    logger.info("generated %r", mesh)

    print(f"{mesh.family}: {len(mesh.vertices)} vertices, {len(mesh.triangles)} triangles, "
          f"volume {signed_volume(mesh.vertices, mesh.triangles):.6f}")

    if args.out:
        fmt = "stl" if args.stl else "ply" if args.ply else ""
        try:
            save_mesh(args.out, mesh.vertices, mesh.triangles, fmt=fmt)
        except ValueError as exc:
            p.error(str(exc))

    if args.display:
        from .display import display_mesh
        display_mesh(mesh.vertices, mesh.triangles, title=mesh.family)
    return 0
