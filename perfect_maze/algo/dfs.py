from typing import Iterator, List, Optional, Tuple

from perfect_maze.algo.base import Generator
from perfect_maze.core.cell_info import DistanceCellInfo
from perfect_maze.core.grid import Grid


class RecursiveBacktracker(Generator):
    """
    Randomized depth-first search driven by an explicit stack.

    Every unvisited neighbour of the popped cell is claimed and connected
    at once; the randomly chosen one is pushed last so it is explored
    first, the others wait on the stack for backtracking.
    """
    name = "dfs"
    info_factory = DistanceCellInfo
    uses_start = True

    def unvisited_neighbours(self, x: int, y: int) -> List[Tuple[int, int]]:
        grid = self.grid
        neighbours = []
        # West, North, East, South
        for nx, ny in ((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1)):
            if grid.contains(nx, ny) and not grid.info(nx, ny).visited:
                neighbours.append((nx, ny))
        return neighbours

    def carve(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        root = grid.info(*self.start)
        root.visited = True
        root.root_distance = 0

        # Stack of (x, y)
        stack: List[Tuple[int, int]] = [tuple(self.start)]

        while stack:
            cx, cy = stack.pop()

            neighbours = self.unvisited_neighbours(cx, cy)
            if not neighbours:
                # Backtrack
                continue

            chosen = rng.randrange(len(neighbours))
            distance = grid.info(cx, cy).root_distance + 1
            for i, (nx, ny) in enumerate(neighbours):
                info = grid.info(nx, ny)
                info.visited = True
                info.root_distance = distance
                if i != chosen:
                    stack.append((nx, ny))
            stack.append(neighbours[chosen])

            grid.connect_all((cx, cy), neighbours)

            if self.step():
                yield f"Carving... Stack: {len(stack)}"


def generate(width: int, height: int, start: Tuple[int, int] = (0, 0), seed: int = 0) -> Optional[Grid]:
    return RecursiveBacktracker(width, height, seed=seed, start=start).generate()
