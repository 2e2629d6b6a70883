from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SCORING_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"

REQUIRED_SECTIONS = ("weights", "points", "thresholds", "bands")


class ScoringConfigError(RuntimeError):
    pass


def _scoring_path() -> Path:
    override = os.getenv("SCORING_CONFIG_PATH")
    return Path(override) if override else DEFAULT_SCORING_PATH


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    """ATS weights, points, thresholds and bands, read once from scoring.yaml."""
    path = _scoring_path()
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ScoringConfigError(f"Scoring config not found at '{path}'.") from exc
    except (OSError, yaml.YAMLError) as exc:
        raise ScoringConfigError(f"Cannot load scoring config '{path}': {exc}") from exc

    ats = parsed.get("ats") if isinstance(parsed, dict) else None
    if not isinstance(ats, dict):
        raise ScoringConfigError(f"Scoring config '{path}' must define an 'ats' mapping.")
    missing = [name for name in REQUIRED_SECTIONS if not isinstance(ats.get(name), dict)]
    if missing:
        raise ScoringConfigError(f"Scoring config '{path}' is missing: {', '.join(missing)}.")
    return parsed


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Dot-path lookup, e.g. ``ats.weights.keywords``."""
    current: Any = get_scoring_config()
    for key in path.split(".") if path else ():
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current if path else default
