import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.algo.registry import GENERATORS, create
from perfect_maze.core.complexity import MazeAnalyzer


def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height/1e6:.2f}M cells) ---")

    for name in GENERATORS:
        gen_start = time.time()
        grid = create(name, width, height, seed=42).generate()
        gen_time = time.time() - gen_start

        stats = MazeAnalyzer.calculate_stats(grid)
        print(f"{name:<12} {gen_time:.4f}s  {(width*height)/max(gen_time, 1e-9):,.0f} cells/sec  "
              f"dead ends {stats['dead_end_percent']:.1f}%")


def run_suite():
    sizes = [
        (50, 50),
        (200, 200),
        (500, 500),
    ]

    for w, h in sizes:
        benchmark_size(w, h)


if __name__ == "__main__":
    run_suite()
