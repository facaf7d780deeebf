from typing import Dict, Optional, Tuple, Type

from perfect_maze.algo.base import Generator
from perfect_maze.algo.binary_tree import BinaryTree
from perfect_maze.algo.dfs import RecursiveBacktracker
from perfect_maze.algo.division import RecursiveDivision
from perfect_maze.algo.kruskal import KruskalsAlgorithm
from perfect_maze.algo.prim import PrimsAlgorithm
from perfect_maze.algo.sidewinder import Sidewinder
from perfect_maze.core.grid import Grid

GENERATORS: Dict[str, Type[Generator]] = {
    cls.name: cls
    for cls in (BinaryTree, Sidewinder, RecursiveBacktracker, PrimsAlgorithm, KruskalsAlgorithm, RecursiveDivision)
}


def get_generator(algo: str) -> Type[Generator]:
    try:
        return GENERATORS[algo]
    except KeyError:
        raise KeyError(f"Unknown algorithm '{algo}', expected one of: {', '.join(GENERATORS)}") from None


def create(algo: str, width: int, height: int, start: Optional[Tuple[int, int]] = None,
           seed: int = 0) -> Generator:
    """Instantiates a generator; 'start' is ignored by algorithms without a start cell."""
    return get_generator(algo)(width, height, seed=seed, start=start)


def generate(algo: str, width: int, height: int, start: Optional[Tuple[int, int]] = None,
             seed: int = 0) -> Optional[Grid]:
    return create(algo, width, height, start=start, seed=seed).generate()
