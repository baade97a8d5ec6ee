from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'sections': 0,
        'rooms': 0,
        'doors': 0,
        'door_coves': 0,
        'merge_coves': 0,
        'corridor_cells': 0,
        'temporary_cleared': 0,
        'runtime_ms': 0.0,
    }
