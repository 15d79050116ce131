"""
Runtime configuration shared by the CLI and the GUI.

Values come from the environment first and can be overridden by command-line
flags:

  CHT_EDITOR_ENCODING      text encoding of .cht files (default utf-8)
  CHT_EDITOR_DEBUG         1 / true / yes / on → verbose logging
  CHT_EDITOR_DEFAULT_NAME  file name given to new documents
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = ["EditorConfig", "DEFAULT_NAME"]

logger = logging.getLogger(__name__)

DEFAULT_NAME = "cheats.cht"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class EditorConfig:
    """Runtime configuration for file I/O and logging."""
    encoding:     str  = "utf-8"
    debug:        bool = False
    default_name: str  = DEFAULT_NAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Build a config from CHT_EDITOR_* variables (os.environ by default)."""
        env = os.environ if environ is None else environ
        config = cls(
            encoding=env.get("CHT_EDITOR_ENCODING", "") or "utf-8",
            debug=env.get("CHT_EDITOR_DEBUG", "").strip().lower() in _TRUTHY,
            default_name=env.get("CHT_EDITOR_DEFAULT_NAME", "") or DEFAULT_NAME,
        )
        logger.debug("Loaded %s", config)
        return config

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO
