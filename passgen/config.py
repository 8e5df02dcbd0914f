# passgen/config.py
"""
Simple settings persistence for passgen.
Settings saved as JSON in $PASSGEN_HOME/config.json, %APPDATA%/Passgen/config.json (Windows)
or ~/.passgen/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any

from .errors import ConfigError
from .models import NamedPolicy
from .policy import MAX_LENGTH, validate_length

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 10,
    "type": None,  # if None, toggles decide the alphabet
    "max_length": MAX_LENGTH,
}

def _appdata_dir() -> str:
    home = os.getenv("PASSGEN_HOME")
    appdata = os.getenv("APPDATA")
    if home:
        d = home
    elif appdata:
        d = os.path.join(appdata, "Passgen")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passgen")
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def _check(key: str, value: Any, cfg: Dict[str, Any]) -> Any:
    """Validate one typed setting against the current cfg; raise ConfigError if bad."""
    if key == "type":
        return None if value is None else NamedPolicy.parse(value).value
    if key == "max_length":
        # the ceiling may only be lowered
        return validate_length(value)
    return validate_length(value, cfg.get("max_length", MAX_LENGTH))

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults; max_length first so length is checked against it
    out = DEFAULTS.copy()
    for key in ("max_length", "type", "length"):
        if key not in data:
            continue
        try:
            out[key] = _check(key, data[key], out)
        except ConfigError as e:
            logger.warning("ignoring setting %r in %s: %s", key, p, e)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    os.makedirs(os.path.dirname(p), exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def set_value(cfg: Dict[str, Any], key: str, raw: str) -> Dict[str, Any]:
    """Validate a raw string setting and return an updated copy of cfg."""
    if key not in DEFAULTS:
        raise ConfigError(f"unknown setting {key!r} (known: {', '.join(DEFAULTS)})")
    out = dict(cfg)
    if key == "type":
        out[key] = _check(key, None if raw.lower() in ("", "none") else raw, out)
        return out
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None
    out[key] = _check(key, value, out)
    return out
