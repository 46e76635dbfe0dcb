
CONFIG = {
    "CELL_SIZE": 30,
    "TICK_MS": 1000,
    "KEY_REPEAT_DELAY_MS": 170,
    "KEY_REPEAT_INTERVAL_MS": 50,
    "SEED": None,
    "LOG_LEVEL": "info",
    "USE_RICH": True,
}

_POSITIVE = ("CELL_SIZE", "TICK_MS")


def configure(**overrides):
    """Apply overrides to CONFIG; unknown keys and bad sizes raise ValueError."""
    for key, value in overrides.items():
        if key not in CONFIG:
            raise ValueError(f"unknown config key: {key}")
        if key in _POSITIVE and int(value) <= 0:
            raise ValueError(f"{key} must be positive, got {value!r}")
    CONFIG.update(overrides)
    return CONFIG
