from typing import Iterator, Optional

from perfect_maze.algo.base import Generator
from perfect_maze.core.grid import Grid


class BinaryTree(Generator):
    """
    Memoryless generator: every cell independently opens a passage to its
    west or north neighbour. Produces an uncut corridor along the top row
    and the left column.
    """
    name = "binary_tree"

    def carve(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        for y in range(grid.height):
            for x in range(grid.width):
                neighbours = []
                if x > 0:
                    neighbours.append((x - 1, y))  # West
                if y > 0:
                    neighbours.append((x, y - 1))  # North
                if not neighbours:
                    continue

                grid.connect((x, y), neighbours[rng.randrange(len(neighbours))])
                if self.step():
                    yield f"Row {y}/{grid.height}"


def generate(width: int, height: int, seed: int = 0) -> Optional[Grid]:
    return BinaryTree(width, height, seed=seed).generate()
