from typing import Dict


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'cells_carved': 0,
        'walls_loosened': 0,
        'floor_cells': 0,
        'dead_ends': 0,
        'max_depth_reached': 0,
        'depth_capped': False,
        'exit_placed': False,
        'runtime_ms': 0.0,
    }
