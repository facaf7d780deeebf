import unittest
import sys
import os

# Add project root to path so we can import perfect_maze
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.grid import Grid, Point, Cell
from perfect_maze.core.cell_info import CellInfo, DistanceCellInfo, BucketCellInfo
from perfect_maze.core.complexity import MazeAnalyzer


class TestGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 10, 7
        grid = Grid(w, h)
        self.assertEqual(grid.width, w)
        self.assertEqual(grid.height, h)
        self.assertEqual(len(grid.cells), w * h)
        # All cells start isolated
        for val in grid.cells:
            self.assertEqual(val, Grid.ALL_WALLS)
        self.assertEqual(grid.edge_count(), 0)

    def test_degenerate(self):
        grid = Grid(0, 0)
        self.assertEqual(grid.width, 0)
        self.assertEqual(grid.height, 0)
        self.assertEqual(list(grid.iter_points()), [])
        with self.assertRaises(ValueError):
            Grid(-1, 3)

    def test_coordinates(self):
        grid = Grid(5, 4)
        self.assertEqual(grid.get_index(2, 2), 12)  # 2 * 5 + 2

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 4)
        with self.assertRaises(IndexError):
            grid[5, 0]

    def test_cell_view(self):
        grid = Grid(3, 3)
        cell = grid[1, 2]
        self.assertIsInstance(cell, Cell)
        self.assertEqual(cell.point, Point(1, 2))
        self.assertEqual(cell, grid.cell(1, 2))
        self.assertEqual(cell.connections, frozenset())
        grid.connect((1, 2), (1, 1))
        self.assertEqual(cell.connections, frozenset({Point(1, 1)}))

    def test_connect_symmetric(self):
        grid = Grid(2, 2)
        grid.connect((0, 0), (1, 0))

        self.assertTrue(grid.is_connected((0, 0), (1, 0)))
        self.assertTrue(grid.is_connected((1, 0), (0, 0)))
        self.assertFalse(grid.has_wall(0, 0, Grid.EAST))
        self.assertFalse(grid.has_wall(1, 0, Grid.WEST))
        # Others remain
        self.assertTrue(grid.has_wall(0, 0, Grid.SOUTH))
        self.assertTrue(grid.has_wall(1, 0, Grid.SOUTH))
        self.assertTrue(MazeAnalyzer.is_symmetric(grid))

    def test_connect_idempotent(self):
        grid = Grid(2, 2)
        grid.connect((0, 0), (0, 1))
        grid.connect((0, 1), (0, 0))
        self.assertEqual(grid.edge_count(), 1)

    def test_connect_rejects_non_adjacent(self):
        grid = Grid(3, 3)
        with self.assertRaises(ValueError):
            grid.connect((0, 0), (2, 0))
        with self.assertRaises(ValueError):
            grid.connect((1, 1), (2, 2))
        with self.assertRaises(ValueError):
            grid.connect((1, 1), (1, 1))
        self.assertFalse(grid.is_connected((0, 0), (2, 2)))

    def test_connect_all(self):
        grid = Grid(3, 3)
        grid.connect_all((1, 1), [])
        self.assertEqual(grid.edge_count(), 0)

        grid.connect_all((1, 1), [(0, 1), (1, 0), (2, 1), (1, 2)])
        self.assertEqual(grid.edge_count(), 4)
        self.assertEqual(set(grid.connections(1, 1)), {(0, 1), (1, 0), (2, 1), (1, 2)})
        self.assertEqual(set(grid.connections(0, 1)), {(1, 1)})

    def test_disconnect(self):
        grid = Grid(2, 2)
        grid.connect((0, 0), (1, 0))
        grid.disconnect((1, 0), (0, 0))
        self.assertFalse(grid.is_connected((0, 0), (1, 0)))
        self.assertEqual(grid.edge_count(), 0)

        # Absent connection: no-op
        grid.disconnect((0, 0), (0, 1))
        self.assertEqual(grid.edge_count(), 0)
        self.assertTrue(MazeAnalyzer.is_symmetric(grid))

    def test_disconnect_non_adjacent_is_noop(self):
        grid = Grid(3, 3, connected=True)
        edges = grid.edge_count()
        grid.disconnect((0, 0), (2, 2))
        grid.disconnect((1, 1), (1, 1))
        self.assertEqual(grid.edge_count(), edges)
        self.assertTrue(MazeAnalyzer.is_symmetric(grid))

    def test_fully_connected(self):
        w, h = 4, 3
        grid = Grid(w, h, connected=True)
        # Every horizontal and vertical pair
        self.assertEqual(grid.edge_count(), (w - 1) * h + w * (h - 1))
        self.assertEqual(MazeAnalyzer.reachable_count(grid), w * h)
        self.assertTrue(MazeAnalyzer.is_symmetric(grid))

    def test_disconnect_row(self):
        grid = Grid(4, 3, connected=True)
        grid.disconnect_row(Point(0, 0), 0, 4, 2)
        for x in range(4):
            self.assertEqual(grid.is_connected((x, 0), (x, 1)), x == 2)
        # Row below untouched
        for x in range(4):
            self.assertTrue(grid.is_connected((x, 1), (x, 2)))

    def test_disconnect_col_with_origin(self):
        grid = Grid(4, 4, connected=True)
        grid.disconnect_col(Point(1, 2), 1, 2, 0)
        # Wall between columns 2 and 3, rows 2..3, gate at row 2
        self.assertTrue(grid.is_connected((2, 2), (3, 2)))
        self.assertFalse(grid.is_connected((2, 3), (3, 3)))
        # Outside the sub-area
        self.assertTrue(grid.is_connected((2, 0), (3, 0)))
        self.assertTrue(grid.is_connected((2, 1), (3, 1)))

    def test_neighbors(self):
        grid = Grid(3, 3)
        self.assertEqual(len(list(grid.get_neighbors(1, 1))), 4)

        corner_neighbors = list(grid.get_neighbors(0, 0))
        self.assertEqual(len(corner_neighbors), 2)
        self.assertIn((1, 0, Grid.EAST), corner_neighbors)
        self.assertIn((0, 1, Grid.SOUTH), corner_neighbors)

    def test_info_factory(self):
        self.assertIsInstance(Grid(2, 2).info(0, 0), CellInfo)

        grid = Grid(2, 2, info_factory=DistanceCellInfo)
        info = grid.info(1, 1)
        self.assertFalse(info.visited)
        self.assertEqual(info.root_distance, 0)
        info.root_distance = 3
        self.assertEqual(grid[1, 1].info.root_distance, 3)
        # Payloads are per cell, not shared
        self.assertEqual(grid.info(0, 0).root_distance, 0)

        grid = Grid(2, 1, info_factory=BucketCellInfo)
        self.assertEqual(grid.info(1, 0).bucket_id, 0)


if __name__ == '__main__':
    unittest.main()
