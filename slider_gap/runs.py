"""Per-column index of vertical runs of black pixels."""
from dataclasses import dataclass
from typing import Dict, Iterable, List


@dataclass
class Run:
    start_row: int
    current_row: int
    length: int = 1


RunIndex = Dict[int, List[Run]]


def index_vertical_runs(coordinates: Iterable) -> RunIndex:
    """Group raster-ordered black pixels into contiguous vertical runs per column.

    Coordinates must arrive with increasing rows within each column, which the
    row-major scan of the binarizer guarantees. The result iterates columns in
    ascending order.
    """
    runs: RunIndex = {}
    for x, y in coordinates:
        column = runs.get(x)
        if column is None:
            runs[x] = [Run(start_row=y, current_row=y)]
            continue
        last = column[-1]
        if last.current_row == y - 1:
            last.length += 1
            last.current_row = y
        else:
            column.append(Run(start_row=y, current_row=y))
    return dict(sorted(runs.items()))
