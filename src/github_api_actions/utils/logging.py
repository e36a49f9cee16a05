from __future__ import annotations
import logging
import logging.config
import os
from pathlib import Path
from typing import Optional
import yaml

DEFAULT_LOGGING_CONFIG = "configs/logging.yaml"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(config_path: Optional[str] = None, verbose: bool = False) -> None:
    """Setup logging configuration from YAML file."""
    path = Path(config_path or os.getenv("GITHUB_API_LOGGING_CONFIG", DEFAULT_LOGGING_CONFIG))
    if not path.exists():
        # Safe fallback
        logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)
        return

    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    logging.config.dictConfig(cfg)
    if verbose:
        logging.getLogger("github_api_actions").setLevel(logging.DEBUG)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
