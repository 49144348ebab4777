"""
CLI entry point. Run as: python -m wireproof --level <name>

Plays a registered level's scripted solution against the proof engine and
reports the resulting case tree.
"""

import argparse

from .levels import LEVELS, solve
from .session import LevelSession
from .unlocks import Unlocks
from .visualization import print_case, print_case_tree, print_history, export_dot


def main():
    parser = argparse.ArgumentParser(description="Replay a proof level's solution")
    parser.add_argument(
        "--level",
        choices=list(LEVELS.keys()),
        default="and_intro",
        help="Which level to play",
    )
    parser.add_argument("--unlocks", choices=[u.name.lower() for u in Unlocks], default=None,
                        help="Override the level's unlocks")
    parser.add_argument("--dot",   type=str, default=None, help="Export the final case as a DOT graph")
    parser.add_argument("--list",  action="store_true",    help="List levels and exit")
    parser.add_argument("--quiet", action="store_true",    help="Less output")
    args = parser.parse_args()

    if args.list:
        for name, level in LEVELS.items():
            print(f"  {name:<15} {level['description']}")
        return

    level = LEVELS[args.level]
    unlocks = Unlocks[args.unlocks.upper()] if args.unlocks else level["unlocks"]
    session = LevelSession(level["spec"], unlocks=unlocks, verbose=not args.quiet)

    print(f"Level: {args.level} ({level['description']})")
    print_case(session.case)

    solved = solve(session, level["solution"])

    print_case(session.case)
    print_case_tree(session.tree)
    print_history(session.tree)

    if solved:
        print("\nQED: every case is solved.")
    else:
        print(f"\nNot solved. Open cases: {[c.index for c in session.tree.open_cases()]}")

    if args.dot:
        export_dot(session.case, args.dot)


if __name__ == "__main__":
    main()
