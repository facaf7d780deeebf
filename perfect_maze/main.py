import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'perfect_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.algo.registry import GENERATORS, create
from perfect_maze.core.complexity import MazeAnalyzer


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Perfect Maze: spanning-tree maze generators")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=20, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=20, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=0, help="Random Seed")
    gen_parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None,
                            help="Start cell (dfs, prim)")
    gen_parser.add_argument("--algo", type=str, default="dfs", choices=list(GENERATORS), help="Generation Algorithm")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time every algorithm")
    bench_parser.add_argument("--size", type=int, default=200, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=42, help="Random Seed")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("perfect_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        logger.info(f"Generating {args.width}x{args.height} maze with {args.algo.upper()}...")
        generator = create(args.algo, args.width, args.height, start=args.start, seed=args.seed)
        grid = generator.generate()
        if grid is None:
            logger.error(f"No maze for {args.width}x{args.height} start={args.start}")
            return 1

        stats = MazeAnalyzer.calculate_stats(grid)
        logger.info(f"Stats: {stats}")
        logger.info(f"Perfect: {MazeAnalyzer.is_perfect(grid)}")
        print("Done.")

    elif args.command == "benchmark":
        if args.size < 1:
            logger.error(f"Benchmark size must be positive, got {args.size}")
            return 1
        logger.info(f"Running Generator Benchmark Suite (Size: {args.size}x{args.size})...")

        print(f"\n{'ALGORITHM':<12} | {'TIME (s)':<10} | {'DEAD ENDS':<10} | {'PERFECT':<8}")
        print("-" * 50)

        for name in GENERATORS:
            t_start = time.time()
            grid = create(name, args.size, args.size, seed=args.seed).generate()
            duration = time.time() - t_start

            stats = MazeAnalyzer.calculate_stats(grid)
            perfect = MazeAnalyzer.is_perfect(grid)
            print(f"{name:<12} | {duration:<10.4f} | {stats['dead_ends']:<10} | {str(perfect):<8}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
