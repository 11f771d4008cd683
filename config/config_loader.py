import json
import os
from datetime import datetime

from rich.console import Console

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "fold_threshold": 1_000_000_000,
    "initial_head": 2,
    "step_width": 24,
    "tape_window": 10,
    "log_runs": False,
    "output_directory": "logs/",
    "log_file_prefix": "brusque_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "fold_threshold": int,
    "initial_head": int,
    "step_width": int,
    "tape_window": int,
    "log_runs": bool,
    "output_directory": str,
    "log_file_prefix": str
}

err_console = Console(stderr=True)

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is an int subclass; reject it where a number is expected
        if not isinstance(config[key], expected_type) or (expected_type is int and isinstance(config[key], bool)):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    for key in ("fold_threshold", "step_width"):
        if config[key] < 1:
            raise ValueError(f"Config key '{key}' must be positive, got {config[key]}.")
    for key in ("initial_head", "tape_window"):
        if config[key] < 0:
            raise ValueError(f"Config key '{key}' must not be negative, got {config[key]}.")

def load_config(path=DEFAULT_CONFIG_PATH, echo=False):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    if config["log_runs"]:
        os.makedirs(config["output_directory"], exist_ok=True)

    # stdout carries the trace, so the summary goes to stderr
    if echo:
        err_console.print(f"[{datetime.now()}] Loaded config:", markup=False)
        for key, value in config.items():
            err_console.print(f"  {key}: {value}", markup=False)

    return config

def runtime_config(path=None, echo=False):
    """Load `path`, or the default file when it exists, or fall back to the defaults."""
    if path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return DEFAULT_CONFIG.copy()
        path = DEFAULT_CONFIG_PATH
    return load_config(path, echo=echo)
