"""
Evaluation Module

Benchmarks the route search and instruction compiler on random towns,
checking every route against an exhaustive reference distance.
"""

import json
import numpy as np
from pathlib import Path
from typing import Dict
from tqdm import tqdm

from .grid import TownGrid
from .instructions import compile_instructions, group_path
from .pose import Action, IllegalActionError, Pose
from .search import path_to_actions, replay, search, shortest_distance
from .town_generator import GRID_SIZE, TARGET_CATEGORY, generate_scenario


def run_episode(grid: TownGrid, target: str, start: Pose) -> Dict:
    """
    Route one scenario and check the result.

    Args:
        grid: Town grid
        target: Target landmark name
        start: Start pose

    Returns:
        Episode results dictionary
    """
    path = search(grid, start, target)
    optimal_length = shortest_distance(grid, start, target)

    if path is None:
        return {
            'found': False,
            'arrived': False,
            'optimal': optimal_length is None,
            'path_length': None,
            'optimal_length': optimal_length,
            'turns': 0,
            'groups': 0,
            'instruction_lines': 1,
        }

    actions = path_to_actions(path)
    try:
        final = replay(start, actions, grid.size)
        arrived = grid.is_adjacent(final.intersection, target)
    except IllegalActionError:
        arrived = False

    lines = compile_instructions(path, start, grid, target)

    return {
        'found': True,
        'arrived': arrived,
        'optimal': len(path) == optimal_length,
        'path_length': len(path),
        'optimal_length': optimal_length,
        'turns': sum(1 for a in actions if a is not Action.FORWARD),
        'groups': len(group_path(path)),
        'instruction_lines': len(lines),
    }


def benchmark(
    num_episodes: int = 100,
    grid_size: int = GRID_SIZE,
    target_category: str = TARGET_CATEGORY,
    base_seed: int = 12345,
    verbose: bool = True
) -> Dict:
    """
    Benchmark route search on random towns.

    Args:
        num_episodes: Number of test episodes
        grid_size: Size of towns
        target_category: Category the targets are drawn from
        base_seed: Random seed for reproducibility
        verbose: Whether to show progress bar

    Returns:
        Benchmark results dictionary
    """
    results = []
    iterator = range(num_episodes)
    if verbose:
        iterator = tqdm(iterator, desc="Benchmarking")

    for i in iterator:
        try:
            grid, target, start = generate_scenario(
                size=grid_size,
                target_category=target_category,
                seed=base_seed + i
            )
        except ValueError:
            # Skip failed scenario generation
            continue

        metrics = run_episode(grid, target, start)
        metrics['episode'] = i
        metrics['target'] = target
        metrics['start'] = [start.row, start.col, start.direction.label]
        results.append(metrics)

    n = len(results)
    found = [r for r in results if r['found']]
    lengths = [r['path_length'] for r in found]

    summary = {
        'num_episodes': n,
        'found_rate': len(found) / n if n else 0,
        'arrival_rate': sum(1 for r in results if r['arrived']) / n if n else 0,
        'optimal_rate': sum(1 for r in results if r['optimal']) / n if n else 0,
        'mean_path_length': np.mean(lengths) if lengths else 0.0,
        'max_path_length': max(lengths) if lengths else 0,
        'mean_turns': np.mean([r['turns'] for r in found]) if found else 0.0,
        'mean_instruction_lines': np.mean([r['instruction_lines'] for r in results]) if n else 0.0,
        'grid_size': grid_size,
    }

    return {
        'summary': summary,
        'episodes': results
    }


def print_benchmark_table(summary: Dict) -> None:
    """Print formatted benchmark results."""
    print("\n" + "=" * 50)
    print("Town Navigator Benchmark Results")
    print("=" * 50)
    print(f"Grid Size: {summary['grid_size']}x{summary['grid_size']}")
    print(f"Episodes:  {summary['num_episodes']}")
    print("-" * 50)
    print(f"Route found:       {summary['found_rate']*100:.1f}%")
    print(f"Arrived on replay: {summary['arrival_rate']*100:.1f}%")
    print(f"Optimal length:    {summary['optimal_rate']*100:.1f}%")
    print(f"Mean actions:      {summary['mean_path_length']:.2f} (max {summary['max_path_length']})")
    print(f"Mean turns:        {summary['mean_turns']:.2f}")
    print(f"Mean narration:    {summary['mean_instruction_lines']:.2f} lines")
    print("=" * 50)

    all_pass = (
        summary['found_rate'] == 1.0
        and summary['arrival_rate'] == 1.0
        and summary['optimal_rate'] == 1.0
    )
    print(f"\nOverall: {'PASS' if all_pass else 'FAIL'}")


def save_results(results: Dict, path: str) -> None:
    """Save benchmark results to JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Convert numpy types for JSON serialization
    def convert(obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        return obj

    with open(path, 'w') as f:
        json.dump(results, f, default=convert, indent=2)

    print(f"Results saved to {path}")


def main():
    """Entry point for evaluation."""
    import argparse

    parser = argparse.ArgumentParser(description="Benchmark Town Navigator")
    parser.add_argument("--num-episodes", type=int, default=100)
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE)
    parser.add_argument("--target-category", default=TARGET_CATEGORY)
    parser.add_argument("--output", default="results/benchmark.json")
    parser.add_argument("--seed", type=int, default=12345)

    args = parser.parse_args()

    results = benchmark(
        num_episodes=args.num_episodes,
        grid_size=args.grid_size,
        target_category=args.target_category,
        base_seed=args.seed
    )

    # Print and save results
    print_benchmark_table(results['summary'])
    save_results(results, args.output)


if __name__ == "__main__":
    main()
