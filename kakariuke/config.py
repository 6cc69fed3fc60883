# kakariuke/config.py
import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

# Base paths relative to the project root
BASE_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = BASE_DIR / "config"
OUTPUT_DIR = BASE_DIR / "output"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "parser.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "analyzer": {
        "udic": None,  # Path to a janome user dictionary (CSV)
        "udic_enc": "utf8",
        "udic_type": "ipadic",  # or "simpledic"
    },
    "parser": {
        "validate": False,
        "require_non_empty": False,
    },
    "export": {
        "format": "json",
        "output_dir": str(OUTPUT_DIR),
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(levelname)s - %(message)s",
    },
    "samples": [
        "太郎は花子にプレゼントをあげた。",
        "私は昨日、図書館で面白い本を読んだ。",
        "彼女は美しい花を庭に植えた。",
        "先生が生徒に宿題を出した。",
        "猫が窓の外を静かに見ている。",
        "友達と一緒に映画を見に行った。",
        "母は毎朝、新鮮な野菜を市場で買う。",
    ],
}


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Reads YAML config and merges it over DEFAULT_CONFIG (one level deep).
    Without an explicit path, config/parser.yaml is used if present.
    """
    cfg = copy.deepcopy(DEFAULT_CONFIG)

    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return cfg
        path = DEFAULT_CONFIG_PATH

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        loaded = yaml.safe_load(f) or {}

    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(cfg.get(key), dict):
            cfg[key].update(value)
        else:
            cfg[key] = value

    logger.debug(f"Loaded config from {path}")
    return cfg
