"""
config.py — Defaults
=====================
Flat dict of settings.  The Flask app loads it with
`app.config.from_mapping(DEFAULTS)` and then lets any key be overridden
from the environment with a PATHFINDER_ prefix, e.g.

    PATHFINDER_SPEED_MS=5 PATHFINDER_GRID_SIZE='"wide"' python main.py

(`from_prefixed_env` parses values as JSON, hence the quoted string.)
"""

DEFAULTS = {
    "GRID_SIZE":            "compact",   # key into grid.GRID_SIZES
    "BORDER_WALLS":         False,
    "SPEED_MS":             15,          # delay per visited cell
    "PATH_DELAY_MS":        40,          # delay per path cell during reveal
    "WALL_PROBABILITY":     0.3,         # "random" maze option
    "DEFAULT_ALGO":         "astar",
    "DEFAULT_COMPARE_ALGO": "bfs",
    "MAX_SESSIONS":         256,         # in-memory visualizers kept by the API
}
