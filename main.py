#!/usr/bin/env python3
"""
Amphipod Burrow Solver

Reads a burrow diagram and prints the least energy required to move
every amphipod into its own room.
"""

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

from src.burrow.parser import DiagramError, parse_burrow, unfold_diagram
from src.ucs_solver import SolverConfig, UCSSolver
from src.util.logger import logger, set_component_level

log = logger.bind(component="cli")


def load_state(path: Path, unfold: bool = False):
    """Read and parse a diagram file."""
    lines = path.read_text().splitlines()
    if unfold:
        lines = unfold_diagram(lines)
    return parse_burrow(lines)


def print_solution(solver: UCSSolver, initial, moves):
    """Print each move followed by the burrow it leaves behind."""
    states = solver.replay(initial, moves)
    print(initial)
    for move, state in zip(moves, states[1:]):
        print()
        print(move)
        print(state)
    print()


def run(args) -> int:
    try:
        initial = load_state(args.diagram, unfold=args.unfold)
    except (OSError, DiagramError) as e:
        log.error(f"Could not load {args.diagram}: {e}")
        return 1

    solver = UCSSolver(SolverConfig(track_path=args.show_path))

    if args.progress:
        with tqdm(desc="Expanding", unit="state", leave=False) as pbar:

            def advance(cost, state):
                pbar.set_postfix(cost=cost, refresh=False)
                pbar.update(1)

            solver.add_expand_callback(advance)
            result = solver.solve(initial)
            solver.remove_expand_callback(advance)
    else:
        result = solver.solve(initial)

    if not result.success:
        print("No solution")
        return 1

    if args.show_path:
        print_solution(solver, initial, result.solution)
    print(result.cost)
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Amphipod Burrow Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py burrow.txt               # Least energy for the diagram
  python main.py burrow.txt --unfold      # Same burrow with the hidden rows
  python main.py burrow.txt --show-path   # Print every move on the way
        """,
    )

    parser.add_argument("diagram", type=Path, help="File holding the burrow diagram")
    parser.add_argument(
        "--unfold", action="store_true", help="Insert the two hidden room rows"
    )
    parser.add_argument(
        "--show-path", action="store_true", help="Print the cheapest move sequence"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar while searching"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log search progress"
    )

    args = parser.parse_args()

    if args.verbose:
        set_component_level("ucs_solver", "DEBUG")
        set_component_level("parser", "DEBUG")

    sys.exit(run(args))


if __name__ == "__main__":
    main()
