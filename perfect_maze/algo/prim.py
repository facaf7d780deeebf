from typing import Dict, Iterator, List, Optional, Tuple

from perfect_maze.algo.base import Generator
from perfect_maze.core.cell_info import DistanceCellInfo
from perfect_maze.core.grid import Grid


class PrimsAlgorithm(Generator):
    """
    Cell-based randomized Prim's: grows the tree from the start cell by
    repeatedly attaching a random frontier cell to one of its visited
    neighbours.
    """
    name = "prim"
    info_factory = DistanceCellInfo
    uses_start = True

    def neighbours(self, x: int, y: int, visited: bool) -> List[Tuple[int, int]]:
        grid = self.grid
        found = []
        # West, North, East, South
        for nx, ny in ((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1)):
            if grid.contains(nx, ny) and grid.info(nx, ny).visited == visited:
                found.append((nx, ny))
        return found

    def carve(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        grid.info(*self.start).root_distance = 0

        # Frontier: list for random choice plus position map for O(1) membership
        # and swap-remove, so selection order only depends on the seed
        frontier: List[Tuple[int, int]] = [tuple(self.start)]
        position: Dict[Tuple[int, int], int] = {frontier[0]: 0}

        while frontier:
            idx = rng.randrange(len(frontier))
            cx, cy = frontier[idx]
            info = grid.info(cx, cy)
            info.visited = True

            # Attach to the maze through one random visited neighbour
            visited = self.neighbours(cx, cy, visited=True)
            if visited:
                nx, ny = visited[rng.randrange(len(visited))]
                info.root_distance = grid.info(nx, ny).root_distance + 1
                grid.connect((cx, cy), (nx, ny))

            for cell in self.neighbours(cx, cy, visited=False):
                if cell not in position:
                    position[cell] = len(frontier)
                    frontier.append(cell)

            # Swap remove
            last = frontier.pop()
            del position[(cx, cy)]
            if idx < len(frontier):
                frontier[idx] = last
                position[last] = idx

            if self.step():
                yield f"Frontier: {len(frontier)}"


def generate(width: int, height: int, start: Tuple[int, int] = (0, 0), seed: int = 0) -> Optional[Grid]:
    return PrimsAlgorithm(width, height, seed=seed, start=start).generate()
