#!/usr/bin/env python3
"""
Visual Route Test

Generate a town, find the route to the target and show the directions,
the ASCII map and a matplotlib plot.

Usage:
    python scripts/route_visual.py
    python scripts/route_visual.py --seed 42 --size 6
    python scripts/route_visual.py --save results/plots/route.png --no-plot
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
from town_nav.town_generator import GRID_SIZE, TARGET_CATEGORY, generate_scenario
from town_nav.search import search, path_to_actions
from town_nav.pose import ACTION_NAMES
from town_nav.instructions import compile_instructions, NO_PATH_MESSAGE
from town_nav.visualize import plot_town, plot_action_sequence, print_town_ascii


def main():
    parser = argparse.ArgumentParser(description="Visual Route Test")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--size", type=int, default=GRID_SIZE, help="Town size")
    parser.add_argument("--target-category", default=TARGET_CATEGORY, help="Target category")
    parser.add_argument("--save", type=str, default=None, help="Save path for image")
    parser.add_argument("--no-plot", action="store_true", help="ASCII only, no matplotlib")
    args = parser.parse_args()

    print("=" * 50)
    print("Route Search Test")
    print("=" * 50)
    print(f"Town size: {args.size}x{args.size}")
    print(f"Seed:      {args.seed}")
    print()

    # Generate town
    print("Generating town...")
    grid, target, start = generate_scenario(
        size=args.size,
        target_category=args.target_category,
        seed=args.seed
    )

    # Run search
    print("Running search...")
    path = search(grid, start, target)

    print()
    print("-" * 50)
    print("RESULTS")
    print("-" * 50)
    print(f"Target: {target} at cell {grid.find_landmark(target)}")
    print(f"Start:  {start.intersection} facing {start.direction.label}")

    if path is None:
        print(NO_PATH_MESSAGE)
        sys.exit(1)

    actions = path_to_actions(path)
    print(f"Route:  {len(actions)} actions")
    print()
    print("Actions:")
    print("  " + " → ".join(ACTION_NAMES[a] for a in actions))
    print()
    print("Directions:")
    for line in compile_instructions(path, start, grid, target):
        print(f"  {line}")
    print()

    # ASCII visualization
    print_town_ascii(grid, start, path)

    # Matplotlib visualization
    if not args.no_plot or args.save:
        title = f"Route to {target} | {len(actions)} actions | Seed: {args.seed}"
        plot_town(
            grid, target, start,
            path=path,
            title=title,
            save_path=args.save,
            show=not args.no_plot
        )
        if not args.no_plot:
            plot_action_sequence(actions, title="Action Sequence")


if __name__ == "__main__":
    main()
