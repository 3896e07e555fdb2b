import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from cosine_ann.config import DEFAULT_LOG_LEVEL, DEFAULT_TOP_K, SCORE_PRECISION

DEFAULTS: Dict[str, Any] = {
    "top_k": DEFAULT_TOP_K,
    "precision": SCORE_PRECISION,
    "log_level": DEFAULT_LOG_LEVEL,
    "log_file": None,
}


class ConfigLoader:
    def __init__(self, config_path: str):
        self.config_path = Path(config_path)

    def load(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            return {}

        with open(self.config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {self.config_path} must contain a mapping")
        return data


def _validate(config: Dict[str, Any]) -> None:
    for key in ("top_k", "precision"):
        value = config[key]
        # bool is an int subclass but never a meaningful count
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"Config '{key}' must be a non-negative integer, got {value!r}")
    if not isinstance(config["log_level"], str):
        raise ValueError(f"Config 'log_level' must be a string, got {config['log_level']!r}")
    if config["log_file"] is not None and not isinstance(config["log_file"], str):
        raise ValueError(f"Config 'log_file' must be a path string, got {config['log_file']!r}")


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Defaults overlaid with the YAML file at ``config_path`` (if any)."""
    config = dict(DEFAULTS)
    if not config_path:
        return config

    overrides = ConfigLoader(config_path).load()
    unknown = sorted(set(overrides) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    config.update(overrides)
    _validate(config)
    return config
