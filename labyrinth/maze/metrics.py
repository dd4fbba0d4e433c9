from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'cells': 0,
        'kill_phases': 0,
        'kill_steps': 0,
        'hunt_scans': 0,
        'hunt_hits': 0,
        'random_draws': 0,
        'rejected_draws': 0,
        'walls_opened': 0,
        'runtime_ms': 0.0,
    }
