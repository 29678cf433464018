
COLS, ROWS = 10, 20

CONFIG = {
    "CELL_SIZE": 32,
    "TICK_MS": 1000,
    "FAST_DROP_DIVISOR": 20,
    "SEED": None,
    "LOG_LEVEL": "INFO",
    "ROTATION_COLLISION_CHECK": False,
    "PREVIEW_ORIGIN": (COLS + 2, 1),
}
