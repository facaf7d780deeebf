from typing import Iterator, List, Optional, Tuple

from perfect_maze.algo.base import Generator
from perfect_maze.core.grid import Grid


class Sidewinder(Generator):
    """
    Row-by-row generator. Each row is cut into runs carved east; a run is
    closed by opening one of its cells north. The first row is a single
    corridor, since nothing lies north of it.
    """
    name = "sidewinder"

    def carve(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        for y in range(grid.height):
            run: List[Tuple[int, int]] = []
            for x in range(grid.width):
                if y > 0:
                    run.append((x, y))

                if x + 1 < grid.width and (y == 0 or rng.randrange(2) == 0):
                    grid.connect((x, y), (x + 1, y))
                elif y > 0:
                    rx, ry = run[rng.randrange(len(run))]
                    grid.connect((rx, ry), (rx, ry - 1))
                    run.clear()
                else:
                    continue

                if self.step():
                    yield f"Row {y}/{grid.height}"


def generate(width: int, height: int, seed: int = 0) -> Optional[Grid]:
    return Sidewinder(width, height, seed=seed).generate()
