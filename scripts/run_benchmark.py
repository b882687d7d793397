#!/usr/bin/env python3
"""
Run benchmark of the route search on random towns.

Usage:
    python scripts/run_benchmark.py
    python scripts/run_benchmark.py --num-episodes 500 --grid-size 8
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from town_nav.evaluate import benchmark, print_benchmark_table, save_results
from town_nav.town_generator import GRID_SIZE, TARGET_CATEGORY


def main():
    parser = argparse.ArgumentParser(description="Benchmark Town Navigator")
    parser.add_argument("--num-episodes", type=int, default=100,
                        help="Number of test episodes")
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE,
                        help="Town size for evaluation")
    parser.add_argument("--target-category", type=str, default=TARGET_CATEGORY,
                        help="Category targets are drawn from")
    parser.add_argument("--seed", type=int, default=12345,
                        help="Random seed for reproducibility")
    parser.add_argument("--output", type=str, default="results/benchmark.json",
                        help="Output path for results")

    args = parser.parse_args()

    print("=" * 50)
    print("Town Navigator Benchmark")
    print("=" * 50)
    print(f"Episodes:   {args.num_episodes}")
    print(f"Grid size:  {args.grid_size}x{args.grid_size}")
    print(f"Category:   {args.target_category}")
    print("-" * 50)

    print("\nRunning benchmark...")
    results = benchmark(
        num_episodes=args.num_episodes,
        grid_size=args.grid_size,
        target_category=args.target_category,
        base_seed=args.seed,
        verbose=True
    )

    print_benchmark_table(results['summary'])
    save_results(results, args.output)


if __name__ == "__main__":
    main()
