from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"
REQUIRED_SECTIONS = ("weights", "defaults", "keywords", "skills", "formatting", "content", "recommendations")


def scoring_config_path() -> Path:
    override = (os.getenv("SCORING_CONFIG_PATH") or "").strip()
    return Path(override) if override else DEFAULT_SCORING_CONFIG_PATH


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    """Load weights and thresholds from SCORING_CONFIG_PATH (default config/scoring.yaml).

    The result is cached for the process; call ``get_scoring_config.cache_clear()``
    after pointing SCORING_CONFIG_PATH somewhere else.
    """
    path = scoring_config_path()
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise RuntimeError(f"Scoring config not found at '{path}'.") from exc
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    missing = [section for section in REQUIRED_SECTIONS if not isinstance(parsed.get(section), dict)]
    if missing:
        raise RuntimeError(f"Scoring config '{path}' is missing sections: {', '.join(missing)}")

    total = sum(float(value) for value in parsed["weights"].values())
    if abs(total - 1.0) > 1e-6:
        logger.warning("scoring_weights_unbalanced total=%.3f path=%s", total, path)
    logger.debug("scoring_config_loaded path=%s", path)
    return parsed


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up a dotted path such as 'formatting.deductions.invalid_email'."""
    if not path:
        return default
    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
