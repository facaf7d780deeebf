from array import array
from typing import Callable, Iterable, Iterator, List, FrozenSet, NamedTuple, Tuple

from perfect_maze.core.cell_info import CellInfo


class Point(NamedTuple):
    x: int
    y: int


class Cell:
    """
    Read view over one grid slot. Holds no reference to other cells;
    connections are derived from the owning grid's wall bits.
    """
    __slots__ = ('grid', 'x', 'y')

    def __init__(self, grid: "Grid", x: int, y: int):
        self.grid = grid
        self.x = x
        self.y = y

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    @property
    def connections(self) -> FrozenSet[Point]:
        return frozenset(self.grid.connections(self.x, self.y))

    @property
    def info(self):
        return self.grid.info(self.x, self.y)

    def __eq__(self, other):
        return isinstance(other, Cell) and other.grid is self.grid and other.point == self.point

    def __hash__(self):
        return hash((id(self.grid), self.x, self.y))

    def __repr__(self):
        return f"Cell({self.x}, {self.y})"


class Grid:
    # Bitmask Constants (bit set = wall present)
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Direction Helpers
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    __slots__ = ('width', 'height', 'cells', 'infos')

    def __init__(self, width: int, height: int, connected: bool = False,
                 info_factory: Callable[[], CellInfo] = CellInfo):
        if width < 0 or height < 0:
            raise ValueError(f"Grid extents must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        # 'B' (unsigned char) -> 1 byte of wall bits per cell, index y * width + x
        self.cells = array('B', [self.ALL_WALLS] * (width * height))
        self.infos: List[CellInfo] = [info_factory() for _ in range(width * height)]

        if connected:
            for y in range(height):
                for x in range(width):
                    if x > 0:
                        self.carve_path(x, y, self.WEST)
                    if y > 0:
                        self.carve_path(x, y, self.NORTH)

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        self.get_index(x, y)
        return Cell(self, x, y)

    def __getitem__(self, key: Tuple[int, int]) -> Cell:
        x, y = key
        return self.cell(x, y)

    def info(self, x: int, y: int):
        return self.infos[self.get_index(x, y)]

    def iter_points(self) -> Iterator[Point]:
        """Row-major scan of every coordinate."""
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def direction_to(self, a: Tuple[int, int], b: Tuple[int, int]) -> int:
        """
        Returns the direction bit leading from 'a' to the adjacent cell 'b'.
        Raises ValueError if the two cells are not 4-neighbours.
        """
        dx = b[0] - a[0]
        dy = b[1] - a[1]
        for dir_bit in (self.NORTH, self.EAST, self.SOUTH, self.WEST):
            if self.DX[dir_bit] == dx and self.DY[dir_bit] == dy:
                return dir_bit
        raise ValueError(f"Cells {tuple(a)} and {tuple(b)} are not adjacent")

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Removes the wall between current cell (x,y) and the neighbor in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        idx1 = self.get_index(x1, y1)
        x2 = x1 + self.DX[dir_bit]
        y2 = y1 + self.DY[dir_bit]
        idx2 = self.get_index(x2, y2)

        self.cells[idx1] &= ~dir_bit
        self.cells[idx2] &= ~self.OPPOSITE[dir_bit]

    def add_wall(self, x: int, y: int, dir_bit: int):
        idx1 = self.get_index(x, y)
        x2 = x + self.DX[dir_bit]
        y2 = y + self.DY[dir_bit]
        idx2 = self.get_index(x2, y2)

        self.cells[idx1] |= dir_bit
        self.cells[idx2] |= self.OPPOSITE[dir_bit]

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[self.get_index(x, y)] & dir_bit) != 0

    def connect(self, a: Tuple[int, int], b: Tuple[int, int]):
        """Opens the passage between two adjacent cells. Connecting twice is a no-op."""
        self.carve_path(a[0], a[1], self.direction_to(a, b))

    def connect_all(self, a: Tuple[int, int], neighbours: Iterable[Tuple[int, int]]):
        for b in neighbours:
            self.connect(a, b)

    def disconnect(self, a: Tuple[int, int], b: Tuple[int, int]):
        """Closes the passage between a and b. No-op when there is none."""
        try:
            dir_bit = self.direction_to(a, b)
        except ValueError:
            # Non-adjacent or identical cells never share a passage
            return
        self.add_wall(a[0], a[1], dir_bit)

    def is_connected(self, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        try:
            dir_bit = self.direction_to(a, b)
        except ValueError:
            return False
        return not self.has_wall(a[0], a[1], dir_bit)

    def disconnect_row(self, origin: Tuple[int, int], row: int, width: int, gate: int):
        """
        Builds a wall under row 'row' of the sub-area starting at 'origin',
        leaving a single passage at column offset 'gate'.
        """
        ox, oy = origin
        for i in range(width):
            if i == gate:
                continue
            self.add_wall(ox + i, oy + row, self.SOUTH)

    def disconnect_col(self, origin: Tuple[int, int], col: int, height: int, gate: int):
        """
        Builds a wall right of column 'col' of the sub-area starting at 'origin',
        leaving a single passage at row offset 'gate'.
        """
        ox, oy = origin
        for j in range(height):
            if j == gate:
                continue
            self.add_wall(ox + col, oy + j, self.EAST)

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        # North
        if y > 0:
            yield (x, y - 1, self.NORTH)
        # South
        if y < self.height - 1:
            yield (x, y + 1, self.SOUTH)
        # East
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        # West
        if x > 0:
            yield (x - 1, y, self.WEST)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        val = self.cells[self.get_index(x, y)]

        if not (val & self.NORTH) and y > 0:
            yield (x, y - 1)
        if not (val & self.SOUTH) and y < self.height - 1:
            yield (x, y + 1)
        if not (val & self.EAST) and x < self.width - 1:
            yield (x + 1, y)
        if not (val & self.WEST) and x > 0:
            yield (x - 1, y)

    def connections(self, x: int, y: int) -> Iterator[Point]:
        for nx, ny in self.get_open_neighbors(x, y):
            yield Point(nx, ny)

    def connection_sets(self) -> List[FrozenSet[Point]]:
        return [frozenset(self.connections(x, y)) for x, y in self.iter_points()]

    def edge_count(self) -> int:
        # Count each passage once, from its west/north end
        count = 0
        for y in range(self.height):
            for x in range(self.width):
                val = self.cells[y * self.width + x]
                if x < self.width - 1 and not (val & self.EAST):
                    count += 1
                if y < self.height - 1 and not (val & self.SOUTH):
                    count += 1
        return count
