from __future__ import annotations

import argparse
import sys


def cmd_layouts(argv: list[str]) -> int:
    from elpseries.engines.layouts import ALL_LAYOUTS

    p = argparse.ArgumentParser(prog="elpseries layouts", description="Print the multiplier/coefficient layout of every series.")
    p.parse_args(argv)

    for lay in ALL_LAYOUTS.values():
        phi = "-" if lay.phase_col is None else str(lay.phase_col)
        print(f"{lay.name:6s} {lay.expression}")
        print(f"       columns = {', '.join(lay.columns)}")
        print(f"       coefficient width = {lay.coeff_width}, A column = {lay.amp_col}, phi column = {phi}")
    return 0

def cmd_files(argv: list[str]) -> int:
    from elpseries.engines.catalogue import ELP_FILES

    p = argparse.ArgumentParser(prog="elpseries files", description="Print the ELP2000-82B file catalogue.")
    p.add_argument("--layout", default=None, help="only files using this layout (a_sin, a_cos, b, c, d)")
    args = p.parse_args(argv)

    for f in ELP_FILES.values():
        if args.layout and f.layout_name != args.layout:
            continue
        print(f"{f.name:6s} {f.layout_name:6s} {f.coordinate:10s} t^{f.t_power}  {f.description}")
    return 0

def cmd_radian(argv: list[str]) -> int:
    from elpseries.core.units import radian

    p = argparse.ArgumentParser(prog="elpseries radian", description="Convert degrees to radians.")
    p.add_argument("degrees", type=float)
    args = p.parse_args(argv)

    print(f"{radian(args.degrees):.15f}")
    return 0

def cmd_term(argv: list[str]) -> int:
    from elpseries.api import SERIES_FUNCTIONS
    from elpseries.core.errors import SeriesShapeError
    from elpseries.core.units import radian

    p = argparse.ArgumentParser(prog="elpseries term", description="Evaluate a one-term series (arcseconds).")
    p.add_argument("--layout", choices=sorted(SERIES_FUNCTIONS), default="a_sin")
    p.add_argument("--args", type=float, nargs=4, required=True, metavar="X", help="Delaunay arguments D l' l F")
    p.add_argument("--planetary", type=float, nargs="+", default=None, help="Me V T Ma J S U [N] (series c/d only)")
    p.add_argument("--zeta", type=float, default=None, help="precession argument (series b only, default 0)")
    p.add_argument("--mult", type=int, nargs="+", required=True, help="multiplier row")
    p.add_argument("--coef", type=float, nargs="+", required=True, help="coefficient row")
    p.add_argument("--deg", action="store_true", help="arguments are given in degrees")
    p.add_argument("--backend", choices=["python", "numpy"], default="python")
    args = p.parse_args(argv)

    conv = radian if args.deg else float
    delaunay = [conv(x) for x in args.args]
    fn = SERIES_FUNCTIONS[args.layout]
    rows = ([args.mult], [args.coef])

    if args.layout in ("c", "d") and args.planetary is None:
        p.error(f"--planetary is required for layout '{args.layout}'")
    if args.layout not in ("c", "d") and args.planetary is not None:
        p.error(f"--planetary is not used by layout '{args.layout}'")
    if args.layout != "b" and args.zeta is not None:
        p.error(f"--zeta is not used by layout '{args.layout}'")

    try:
        if args.layout in ("a_sin", "a_cos"):
            value = fn(delaunay, *rows, 1, backend=args.backend)
        elif args.layout == "b":
            value = fn(conv(0.0 if args.zeta is None else args.zeta), delaunay, *rows, 1, backend=args.backend)
        else:
            value = fn([conv(x) for x in args.planetary], delaunay, *rows, 1, backend=args.backend)
    except SeriesShapeError as e:
        p.error(str(e))

    print(f"{value:.10f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="elpseries", description="ELP2000-82B series toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("layouts", help="Print the multiplier/coefficient layout of every series.")
    sub.add_parser("files", help="Print the ELP2000-82B file catalogue.")
    sub.add_parser("radian", help="Convert degrees to radians.")
    sub.add_parser("term", help="Evaluate a one-term series.")

    commands = {
        "layouts": cmd_layouts,
        "files": cmd_files,
        "radian": cmd_radian,
        "term": cmd_term,
    }
    # Subcommands own their option parsing; negative numbers must reach them untouched.
    if argv and argv[0] in commands:
        return commands[argv[0]](argv[1:])

    p.parse_args(argv)
    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
