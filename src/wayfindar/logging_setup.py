from __future__ import annotations
import logging, logging.config
from pathlib import Path
import yaml

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(config_path: str | None = None, level: str | None = None) -> None:
    """
    Load logging.yaml from a few sensible locations and fall back to basicConfig.
    Search order:
      1) explicit config_path arg (if provided)
      2) same folder as this file  (wayfindar/logging.yaml)
      3) project root (two levels up, next to src/) (../../logging.yaml)
      4) current working directory (logging.yaml)

    ``level`` overrides the root logger level after the config is applied
    (normally settings.LOG_LEVEL).
    """
    candidates: list[Path] = []
    if config_path:
        candidates.append(Path(config_path))

    here = Path(__file__).resolve().parent
    candidates.extend([
        here / "logging.yaml",
        here.parent.parent / "logging.yaml",
        Path.cwd() / "logging.yaml",
    ])

    for p in candidates:
        if not p.exists():
            continue
        try:
            with open(p, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            logging.config.dictConfig(config)
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            # try next candidate
            logging.getLogger(__name__).debug("Skipping logging config %s: %s", p, e)
            continue
        _apply_level(level)
        logging.getLogger(__name__).info("Loaded logging config from %s", p)
        return

    # Fallback if none found/loaded
    logging.basicConfig(level=logging.INFO, format=DEFAULT_FORMAT)
    _apply_level(level)
    logging.getLogger(__name__).warning("logging.yaml not found; using basicConfig")


def _apply_level(level: str | None) -> None:
    if level:
        logging.getLogger().setLevel(level.upper())
