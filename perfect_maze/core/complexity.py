from collections import deque
from typing import Any, Dict

from perfect_maze.core.grid import Grid


def popcount_walls(val: int) -> int:
    c = 0
    if val & Grid.NORTH: c += 1
    if val & Grid.EAST: c += 1
    if val & Grid.SOUTH: c += 1
    if val & Grid.WEST: c += 1
    return c


class MazeAnalyzer:
    @staticmethod
    def reachable_count(grid: Grid, x: int = 0, y: int = 0) -> int:
        """Number of cells reachable from (x, y) through open passages (BFS)."""
        seen = {(x, y)}
        queue = deque([(x, y)])
        while queue:
            cx, cy = queue.popleft()
            for n in grid.get_open_neighbors(cx, cy):
                if n not in seen:
                    seen.add(n)
                    queue.append(n)
        return len(seen)

    @staticmethod
    def is_symmetric(grid: Grid) -> bool:
        """Every open passage is open from both sides."""
        for y in range(grid.height):
            for x in range(grid.width):
                for nx, ny, dir_bit in grid.get_neighbors(x, y):
                    if grid.has_wall(x, y, dir_bit) != grid.has_wall(nx, ny, Grid.OPPOSITE[dir_bit]):
                        return False
        return True

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        True when the passages form a spanning tree: every cell reachable
        from (0, 0) and exactly one passage fewer than there are cells.
        """
        total = grid.width * grid.height
        if total == 0:
            return True
        if grid.edge_count() != total - 1:
            return False
        return MazeAnalyzer.reachable_count(grid) == total

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, Any]:
        dead_ends = 0
        junctions = 0  # 0, 1 walls
        corridors = 0  # 2 walls

        for i in range(grid.width * grid.height):
            walls = popcount_walls(grid.cells[i])
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: junctions += 1

        total = grid.width * grid.height
        stats = {
            "cells": total,
            "edges": grid.edge_count(),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
        }

        # Only DFS / Prim's payloads carry a distance to the root
        if grid.infos and hasattr(grid.infos[0], "root_distance"):
            stats["max_root_distance"] = max(info.root_distance for info in grid.infos)

        return stats
