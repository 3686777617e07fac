#!/usr/bin/env python3
"""
scripts/analyze_modes.py: which modes does a set of degrees (or keys) spell?

Prints one row per rotation of the selection:

    [#]  |  [Rotation]  |  [Intervals]  |  [Analysis]

Usage:
    python scripts/analyze_modes.py 1 2 3b 4 5 6 7b
    python scripts/analyze_modes.py --notes C E G B          # note names, tonic C
    python scripts/analyze_modes.py --notes A C E --tonic A
    python scripts/analyze_modes.py 1 3 5 --single           # tonic rotation only
    python scripts/analyze_modes.py --notes C Eb G --catalog # + scales containing them
"""
import os
import sys
import argparse
import logging

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from modal_oracle.catalog import scales_containing
from modal_oracle.codec import InvalidDegreeError, degree_to_semitone
from modal_oracle.matcher import analyze_single_mode, classify_label
from modal_oracle.notes import pitch_class_name
from modal_oracle.rotations import analyze_all_rotations, degrees_from_notes

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
GREEN = "\033[92m"
YELL  = "\033[93m"
RED   = "\033[91m"
DIM   = "\033[2m"
RESET = "\033[0m"

_LABEL_COLOUR = {
    "greek":    GREEN,
    "interval": CYAN,
    "pattern":  YELL,
    "none":     DIM,
}


def _coloured(label: str) -> str:
    return f"{_LABEL_COLOUR[classify_label(label)]}{label}{RESET}"


def print_rotation_table(degrees: list[str]) -> int:
    """Print every rotation of `degrees`; returns the number of rows."""
    results = analyze_all_rotations(degrees)
    print(f"\n{BOLD}{'═'*68}{RESET}")
    print(f"{BOLD}  ROTATIONS OF  [{CYAN}{' '.join(degrees)}{RESET}{BOLD}]{RESET}")
    print(f"{BOLD}{'═'*68}{RESET}")
    print(f"  {'#':>2}  {'Rotation':<22}  {'Intervals':<16}  Analysis")
    print(f"  {'─'*2}  {'─'*22}  {'─'*16}  {'─'*20}")
    for r in results:
        row = r.as_dict()
        print(f"  {row['index']:>2}  {row['rotation']:<22}  {row['intervals']:<16}  "
              f"{_coloured(row['analysis'])}")
    if not results:
        print(f"  {DIM}(empty selection){RESET}")
    return len(results)


def print_catalog_matches(degrees: list[str]) -> None:
    notes = [pitch_class_name(degree_to_semitone(d)) for d in degrees]
    matches = scales_containing(notes)
    print(f"\n{BOLD}  Catalog scales containing {' '.join(notes)}:{RESET}")
    if not matches:
        print(f"  {DIM}none{RESET}")
    for name in matches:
        print(f"  • {name}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Identify the modes spelled by a set of scale degrees or piano keys.")
    parser.add_argument("degrees", nargs="*",
                        help="scale degrees, e.g. 1 2 3b 4 5 6 7b")
    parser.add_argument("--notes", nargs="+", default=None,
                        help="note names instead of degrees, e.g. C Eb G")
    parser.add_argument("--tonic", type=str, default="C",
                        help="reference tonic for --notes (default: C)")
    parser.add_argument("--single", action="store_true",
                        help="print only the label for the selection as given")
    parser.add_argument("--catalog", action="store_true",
                        help="also list catalog scales containing the selection")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="debug logging of matcher decisions")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.notes and args.degrees:
        print("Give either degrees or --notes, not both.", file=sys.stderr)
        return 1

    try:
        if args.notes:
            degrees = degrees_from_notes(args.notes, args.tonic)
        else:
            degrees = list(args.degrees)

        if args.single:
            print(_coloured(analyze_single_mode(degrees)))
            return 0

        print_rotation_table(degrees)
        if args.catalog and degrees:
            print_catalog_matches(degrees)
    except InvalidDegreeError as e:
        print(f"{RED}{e}{RESET}", file=sys.stderr)
        return 1

    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
