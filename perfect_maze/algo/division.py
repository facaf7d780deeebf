from typing import Iterator, List, Optional, Tuple

from perfect_maze.algo.base import Generator
from perfect_maze.core.grid import Grid, Point


class RecursiveDivision(Generator):
    """
    Wall builder: starts from a fully connected grid and splits it with a
    wall holding a single gate, then splits both halves again until every
    room is one cell thin.

    Rooms are kept on an explicit stack instead of the call stack. The
    first half of a split is pushed last, so rooms are cut in the same
    depth-first order as the recursive formulation.
    """
    name = "division"
    start_connected = True

    def carve(self) -> Iterator[str]:
        # Rooms of (origin, width, height)
        rooms: List[Tuple[Point, int, int]] = [(Point(0, 0), self.grid.width, self.grid.height)]

        while rooms:
            origin, width, height = rooms.pop()
            halves = self.divide(origin, width, height)
            if not halves:
                continue
            rooms.extend(reversed(halves))

            if self.step():
                yield f"Rooms: {len(rooms)}"

    def divide(self, origin: Point, width: int, height: int) -> List[Tuple[Point, int, int]]:
        """Builds one wall in the room and returns the two sub-rooms."""
        if width < 2 or height < 2:
            return []

        rng = self.rng
        horizontal = rng.randrange(2) == 0
        if horizontal:
            wall = rng.randrange(height - 1)
            gate = rng.randrange(width)
            self.grid.disconnect_row(origin, wall, width, gate)
            return [
                (origin, width, wall + 1),
                (Point(origin.x, origin.y + wall + 1), width, height - wall - 1),
            ]

        wall = rng.randrange(width - 1)
        gate = rng.randrange(height)
        self.grid.disconnect_col(origin, wall, height, gate)
        return [
            (origin, wall + 1, height),
            (Point(origin.x + wall + 1, origin.y), width - wall - 1, height),
        ]


def generate(width: int, height: int, seed: int = 0) -> Optional[Grid]:
    return RecursiveDivision(width, height, seed=seed).generate()
