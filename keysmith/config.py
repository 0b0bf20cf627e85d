# keysmith/config.py
"""
Default generation settings for keysmith.
Read from JSON at $KEYSMITH_CONFIG, %APPDATA%/Keysmith/config.json (Windows) or
~/.keysmith/config.json (fallback). The file is optional and never written.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from .errors import InvalidArgument
from .generator import GenerationConfig, check_flag, check_length

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 12,
    "upper": True,
    "lower": True,
    "digits": True,
    "symbols": False,
    "copies": 1,
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Keysmith")
    return os.path.join(os.path.expanduser("~"), ".keysmith")


def config_path() -> str:
    return os.getenv("KEYSMITH_CONFIG") or os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        log.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, known keys only
    out = DEFAULTS.copy()
    out.update({k: v for k, v in data.items() if k in DEFAULTS})
    return out


def check_copies(copies) -> int:
    if isinstance(copies, bool) or not isinstance(copies, int):
        raise InvalidArgument(f"copies must be an integer, got {copies!r}")
    if copies < 0:
        raise InvalidArgument(f"copies must be >= 0, got {copies}")
    return copies


def generation_config(cfg: Dict[str, Any]) -> GenerationConfig:
    """Build a GenerationConfig from merged settings; wrong value types raise InvalidArgument."""
    return GenerationConfig(
        length=check_length(cfg["length"]),
        include_uppercase=check_flag("upper", cfg["upper"]),
        include_lowercase=check_flag("lower", cfg["lower"]),
        include_numbers=check_flag("digits", cfg["digits"]),
        include_symbols=check_flag("symbols", cfg["symbols"]),
    )
