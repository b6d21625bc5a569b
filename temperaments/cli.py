from __future__ import annotations
import argparse
import logging
import sys

from temperaments.config import GeneratorDefaults, ReportSettings
from temperaments.generators import (
    CARLOS_PRESETS, ORWELL_PRESETS, CarlosParams, EdoParams, OrwellParams, PartchParams,
    build_scale, carlos_sweep,
)
from temperaments.report import render_cents, render_placed, render_sweep, render_table

logger = logging.getLogger(__name__)

def build_parser(defaults: GeneratorDefaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="temperaments",
                                     description="Tuning scale tables annotated with the closest just ratios.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log placement decisions.")
    parser.add_argument("--decimals", type=int, default=ReportSettings.decimals)
    parser.add_argument("--ascending", action="store_true", help="List the root first.")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--cents", action="store_true", help="Only print the step cents.")
    output.add_argument("--placed", action="store_true", help="Only print the placed intervals.")
    sub = parser.add_subparsers(dest="family", required=True)

    edo = sub.add_parser("edo", help="Equal division of the octave.")
    edo.add_argument("steps", type=int, nargs="?", default=defaults.edo_steps)
    edo.add_argument("--ref-freq", type=float, default=defaults.ref_frequency,
                     help="Frequency of the root in Hz.")

    carlos = sub.add_parser("carlos", help="Wendy Carlos alpha/beta/gamma style scales.")
    carlos.add_argument("preset", nargs="?", default=defaults.carlos_preset,
                        choices=sorted(CARLOS_PRESETS) + ["q", "custom"],
                        help="'q' sweeps weight triples, 'custom' uses --weights.")
    carlos.add_argument("--weights", type=int, nargs=3, metavar=("FIFTHS", "MAJ3", "MIN3"))
    carlos.add_argument("--steps", type=int, help="Step count for custom weights.")

    orwell = sub.add_parser("orwell", help="Orwell moment-of-symmetry scales.")
    orwell.add_argument("steps", type=int, nargs="?", default=defaults.orwell_steps)
    orwell.add_argument("method", nargs="?", default=defaults.orwell_method, choices=list(ORWELL_PRESETS),
                        help="'calc' is P12/7, 'g-M' uses g steps of M-EDO.")

    sub.add_parser("partch", help="Harry Partch's 43-tone just scale.")
    return parser

def params_from_args(args, parser):
    if args.family == "edo":
        if args.steps < 1:
            parser.error("edo needs at least one step")
        return EdoParams(args.steps, args.ref_freq)
    if args.family == "carlos":
        if args.preset == "custom":
            if args.weights is None or args.steps is None:
                parser.error("custom needs --weights and --steps")
            if not any(args.weights):
                parser.error("at least one weight must be non-zero")
            if min(args.weights) < 0 or args.steps < 1:
                parser.error("weights must be non-negative and steps positive")
            return CarlosParams(*args.weights, args.steps)
        if args.weights is not None or args.steps is not None:
            parser.error("--weights and --steps only apply to the custom preset")
        return CARLOS_PRESETS[args.preset]
    if args.family == "orwell":
        if args.steps < 1:
            parser.error("orwell needs at least one step")
        preset = ORWELL_PRESETS[args.method]
        if preset is None:
            return OrwellParams(args.steps)
        edo_steps, generator_steps = preset
        return OrwellParams(args.steps, edo_steps, generator_steps)
    return PartchParams()

def main(argv=None, defaults: GeneratorDefaults = None) -> int:
    defaults = defaults or GeneratorDefaults()
    parser = build_parser(defaults)
    args = parser.parse_args(argv)
    if args.decimals < 0:
        parser.error("--decimals must be non-negative")
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("temperaments").setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    settings = ReportSettings(decimals=args.decimals, descending=not args.ascending)

    if args.family == "carlos" and args.preset == "q":
        if args.weights is not None or args.steps is not None:
            parser.error("--weights and --steps only apply to the custom preset")
        print(render_sweep(carlos_sweep(), settings))
        return 0

    params = params_from_args(args, parser)
    scale = build_scale(params)
    logger.info("built %s with %d steps", scale.name, scale.nb_steps)
    if args.cents:
        print(render_cents(scale, settings))
    elif args.placed:
        print(render_placed(scale, settings))
    else:
        print(render_table(scale, settings))
    return 0

if __name__ == "__main__":
    sys.exit(main())
