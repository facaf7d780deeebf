import numpy as np

from perfect_maze.core.grid import Grid


def to_wall_array(grid: Grid) -> np.ndarray:
    """
    Wall bits of every cell as a (height, width) uint8 array.
    Bit set = wall present, see Grid.NORTH / EAST / SOUTH / WEST.
    """
    arr = np.frombuffer(grid.cells.tobytes(), dtype=np.uint8)
    return arr.reshape((grid.height, grid.width)).copy()


def to_raster(grid: Grid) -> np.ndarray:
    """
    Block image of the maze, shape (2*height+1, 2*width+1).
    Cell (x, y) sits at [2y+1, 2x+1]; 1 = wall, 0 = open.
    """
    walls = to_wall_array(grid)
    raster = np.ones((2 * grid.height + 1, 2 * grid.width + 1), dtype=np.uint8)

    # Cell interiors are always open
    raster[1::2, 1::2] = 0
    # East passages sit right of the cell, south passages below it
    raster[1::2, 2:-1:2] = (walls[:, :-1] & Grid.EAST) != 0
    raster[2:-1:2, 1::2] = (walls[:-1, :] & Grid.SOUTH) != 0
    return raster
