import logging
import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from perfect_maze.core.cell_info import CellInfo
from perfect_maze.core.grid import Grid, Point

logger = logging.getLogger(__name__)


class Generator(ABC):
    """
    Base for all maze generators. A generator owns the grid it creates;
    callers only read it, between steps of run() or once generate() returns.
    """
    name = "base"
    info_factory = CellInfo
    # Wall builders start from a fully connected grid
    start_connected = False
    uses_start = False
    # Yield a progress update every N steps; 1 gives a step-by-step view
    progress_interval = 100

    def __init__(self, width: int, height: int, seed: int = 0,
                 start: Optional[Tuple[int, int]] = None):
        self.width = width
        self.height = height
        self.seed = seed
        self.start = Point(*start) if start is not None else Point(0, 0)
        self.rng = random.Random(seed)
        self.grid: Optional[Grid] = None
        self.step_count = 0

    def is_valid(self) -> bool:
        if self.width < 1 or self.height < 1:
            return False
        if self.uses_start:
            return 0 <= self.start.x < self.width and 0 <= self.start.y < self.height
        return True

    def create_grid(self) -> Grid:
        return Grid(self.width, self.height, connected=self.start_connected,
                    info_factory=self.info_factory)

    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        self.grid = None
        if not self.is_valid():
            logger.warning(f"{self.name}: invalid input {self.width}x{self.height} start={tuple(self.start)}")
            return
        self.rng = random.Random(self.seed)
        self.step_count = 0
        self.grid = self.create_grid()
        logger.debug(f"{self.name}: generating {self.width}x{self.height} (seed={self.seed})")

        yield from self.carve()

        logger.debug(f"{self.name}: done after {self.step_count} steps")
        yield "Done"

    @abstractmethod
    def carve(self) -> Iterator[str]:
        """Algorithm body, operating on self.grid and self.rng."""
        pass

    def step(self) -> bool:
        """Counts one carve/cut; True when a progress update is due."""
        self.step_count += 1
        return self.step_count % self.progress_interval == 0

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass

    def generate(self) -> Optional[Grid]:
        """Runs to completion; None when the input cannot produce a maze."""
        self.run_all()
        return self.grid
