
CONFIG = {
    "CELL_SIZE": 32,
    "START_TICKS_PER_DROP": 48,
    "LINE_CLEAR_DELAY_MS": 600,
    "SEED": None,
    "STRICT_SPAWN_CHECK": False,
    "FRONTEND": "curses",
}
