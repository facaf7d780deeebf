from dataclasses import dataclass
from typing import List

from perfect_maze.core.grid import Grid, Point


@dataclass(frozen=True, order=True)
class Edge:
    """
    A carvable wall between two adjacent cells. 'first' is always the
    smaller point, so an edge has a single representation and sorts by
    its first cell's coordinates.
    """
    first: Point
    second: Point

    @classmethod
    def between(cls, a, b) -> "Edge":
        a, b = Point(*a), Point(*b)
        if a == b:
            raise ValueError(f"Edge endpoints must differ, got {a} twice")
        return cls(a, b) if a < b else cls(b, a)


def enumerate_edges(grid: Grid) -> List[Edge]:
    """Every east and south edge of the grid, sorted."""
    edges = []
    for x in range(grid.width):
        for y in range(grid.height):
            if x + 1 < grid.width:
                edges.append(Edge.between((x, y), (x + 1, y)))
            if y + 1 < grid.height:
                edges.append(Edge.between((x, y), (x, y + 1)))
    edges.sort()
    return edges
