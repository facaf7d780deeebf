from dataclasses import dataclass


@dataclass
class CellInfo:
    visited: bool = False


@dataclass
class DistanceCellInfo(CellInfo):
    # Number of passages between this cell and the generation root
    root_distance: int = 0


@dataclass
class BucketCellInfo(CellInfo):
    # Disjoint-set tag: cells sharing a bucket are already mutually connected
    bucket_id: int = 0
