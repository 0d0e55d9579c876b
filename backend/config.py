"""App settings stored in {data_dir}/config.json.

  default_difficulty  difficulty used when an action request omits one
  dramatic_degree     outcome lines read "dramatically" above this degree
  dice_seed           when set, the app rolls from a seeded random.Random

get_config() returns defaults merged with stored values; unknown stored keys
are ignored. update_config() applies partial updates and persists the result.
"""

import json
from pathlib import Path
from typing import Any

_CONFIG_DEFAULTS: dict[str, Any] = {
    "default_difficulty": 5,
    "dramatic_degree": 3,
    "dice_seed": None,
}


def _config_path(data_dir: Path) -> Path:
    return data_dir / "config.json"


def get_config(data_dir: Path) -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config = dict(_CONFIG_DEFAULTS)
    path = _config_path(data_dir)
    if path.is_file():
        stored = json.loads(path.read_text())
        for key in _CONFIG_DEFAULTS:
            if key in stored:
                config[key] = stored[key]
    return config


def update_config(data_dir: Path, fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into config and persist. Returns full config."""
    config = get_config(data_dir)
    for key, value in fields.items():
        if key in _CONFIG_DEFAULTS:
            config[key] = value
    _config_path(data_dir).write_text(json.dumps(config, indent=2))
    return config
