# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Configuration loader for the list rotation library.

Configuration is resolved in this order (later overrides earlier):
1. System defaults (from core/constants.py)
2. Environment variables (ALWAYS win)

Invalid environment values never raise; they are logged and the
default is kept.
"""

import logging
import os
from typing import Mapping, Optional

from .constants import (
    DEFAULT_THREAD_SAFE,
    DEFAULT_WRAP_POSITION,
    ENV_THREAD_SAFE,
    ENV_WRAP_POSITION,
    FALSE_STRINGS,
    TRUE_STRINGS,
)
from .types import RotationConfig

lib_logger = logging.getLogger("list_rotation")


class ConfigLoader:
    """
    Loads and caches RotationConfig.

    Usage:
        loader = ConfigLoader()
        config = loader.load()
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        """
        Initialize the ConfigLoader.

        Args:
            env: Mapping to read overrides from. Defaults to os.environ,
                 read at load time.
        """
        self._env = env
        self._cache: Optional[RotationConfig] = None

    def load(self, force_reload: bool = False) -> RotationConfig:
        """
        Load the rotation configuration.

        Args:
            force_reload: If True, bypass cache and reload

        Returns:
            Complete RotationConfig
        """
        if not force_reload and self._cache is not None:
            return self._cache

        config = RotationConfig(
            wrap_position=DEFAULT_WRAP_POSITION,
            thread_safe=DEFAULT_THREAD_SAFE,
        )
        config = self._apply_env_overrides(config)

        self._cache = config
        return config

    def clear_cache(self) -> None:
        """Forget the cached configuration."""
        self._cache = None

    # =========================================================================
    # INTERNAL METHODS
    # =========================================================================

    def _apply_env_overrides(self, config: RotationConfig) -> RotationConfig:
        env = self._env if self._env is not None else os.environ

        config.wrap_position = self._parse_bool(
            env, ENV_WRAP_POSITION, config.wrap_position
        )
        config.thread_safe = self._parse_bool(env, ENV_THREAD_SAFE, config.thread_safe)

        return config

    def _parse_bool(self, env: Mapping[str, str], env_key: str, default: bool) -> bool:
        """
        Parse a boolean environment variable.

        Args:
            env: Environment mapping
            env_key: Variable name
            default: Value used when unset or invalid

        Returns:
            Parsed boolean
        """
        env_val = env.get(env_key)
        if env_val is None or not env_val.strip():
            return default

        value = env_val.strip().lower()
        if value in TRUE_STRINGS:
            return True
        if value in FALSE_STRINGS:
            return False

        lib_logger.warning(
            f"Invalid {env_key}='{env_val}'. Using '{str(default).lower()}'."
        )
        return default


def load_config(env: Optional[Mapping[str, str]] = None) -> RotationConfig:
    """Load a fresh RotationConfig from defaults and the environment."""
    return ConfigLoader(env).load()
