from typing import Dict

from .cells import CellType
from .grid import Grid


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'cells_carved': 0,
        'frontier_pops': 0,
        'peak_frontier': 0,
        'rooms': 0,
        'start_connector_carved': 0,
        'end_connector_carved': 0,
        'border_violations': 0,
        'reachable_tiles': 0,
        'runtime_ms': 0.0,
    }


def tile_counts(grid: Grid) -> Dict[str, int]:
    counts = {t: 0 for t in CellType}
    for cell in grid:
        counts[cell.cell_type] += 1
    return {f"tiles_{t.value}": n for t, n in counts.items()}
