import logging
from typing import Iterator, List, Optional

from perfect_maze.algo.base import Generator
from perfect_maze.core.cell_info import BucketCellInfo
from perfect_maze.core.edges import enumerate_edges
from perfect_maze.core.grid import Grid, Point

logger = logging.getLogger(__name__)


class KruskalsAlgorithm(Generator):
    """
    Randomized Kruskal's. Passages are carved all over the grid at once:
    random edges are taken from a pool and opened whenever their two cells
    still belong to different buckets, which are then merged.

    Buckets are plain member lists; a merge moves the smaller bucket into
    the larger one and retags every moved cell.
    """
    name = "kruskal"
    info_factory = BucketCellInfo

    def carve(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        # One bucket per cell, tagged with the cell's linear index
        buckets: List[List[Point]] = []
        for x in range(grid.width):
            for y in range(grid.height):
                grid.info(x, y).bucket_id = len(buckets)
                buckets.append([Point(x, y)])

        edges = enumerate_edges(grid)
        merges = 0

        while edges:
            idx = rng.randrange(len(edges))
            edge = edges[idx]

            first = grid.info(*edge.first).bucket_id
            second = grid.info(*edge.second).bucket_id
            if first != second:
                grid.connect(edge.first, edge.second)
                self.merge_buckets(buckets, first, second)
                merges += 1

            # Swap remove
            last = edges.pop()
            if idx < len(edges):
                edges[idx] = last

            if self.step():
                yield f"Edges left: {len(edges)}"

        logger.debug(f"{self.name}: {merges} merges for {grid.width * grid.height} cells")

    def merge_buckets(self, buckets: List[List[Point]], a: int, b: int):
        if a == b:
            return
        # Move the smaller bucket into the larger one
        if len(buckets[a]) > len(buckets[b]):
            a, b = b, a
        for x, y in buckets[a]:
            self.grid.info(x, y).bucket_id = b
        buckets[b].extend(buckets[a])
        buckets[a] = []


def generate(width: int, height: int, seed: int = 0) -> Optional[Grid]:
    return KruskalsAlgorithm(width, height, seed=seed).generate()
