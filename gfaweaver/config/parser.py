#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Configuration parser — layers defaults, a YAML file, environment variables
and command-line options into the settings the reader and CLI use.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .schema import DEFAULT_CONFIG, ConfigValidationError, deep_merge, read_config_file, validate_config

logger = logging.getLogger(__name__)

# ${VAR} or ${VAR:-fallback}
ENV_REFERENCE = re.compile(r'\$\{([^}:]+)(?::-(.*?))?\}')
SCALAR_TYPES = (bool, int, float, str)


def _expand_env(text: str) -> Any:
    """
    Expand ${VAR} references in one config string.

    A value that is nothing but a single reference is re-read as a YAML
    scalar, so ``strict: ${GFA_STRICT}`` with GFA_STRICT=false gives the
    bool False. References embedded in longer text stay plain text.
    """
    def lookup(match):
        return os.environ.get(match.group(1), match.group(2) or '')

    expanded = ENV_REFERENCE.sub(lookup, text)
    if expanded == text or not ENV_REFERENCE.fullmatch(text) or not expanded:
        return expanded

    try:
        typed = yaml.safe_load(expanded)
    except yaml.YAMLError:
        return expanded
    return typed if isinstance(typed, SCALAR_TYPES) else expanded


def _substitute_env(node: Any) -> Any:
    if isinstance(node, dict):
        return {key: _substitute_env(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_substitute_env(item) for item in node]
    if isinstance(node, str):
        return _expand_env(node)
    return node


class ConfigParser:
    """
    Settings for one GFAWeaver run.

    Values are layered in this order, later layers winning:
    DEFAULT_CONFIG, the YAML file (with ${VAR} and ${VAR:-default}
    environment references expanded), then command-line overrides.
    Nested values are read with dotted keys such as ``'reader.strict'``.
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        self.config_file = Path(config_file) if config_file else None
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_file:
            self._load_user_config()

    def _load_user_config(self):
        if not self.config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        user_config = _substitute_env(read_config_file(self.config_file))
        self._config = deep_merge(self._config, user_config)
        logger.debug(f"Loaded configuration from {self.config_file}")

    def merge_cli_overrides(self, overrides: Dict[str, Any]):
        """
        Apply command-line values keyed by dotted path.

        None means the option was not given and leaves the current value.
        A section that is not a mapping is replaced by one.
        """
        for dotted, value in overrides.items():
            if value is None:
                continue

            *parents, leaf = dotted.split('.')
            section = self._config
            for name in parents:
                if not isinstance(section.get(name), dict):
                    section[name] = {}
                section = section[name]
            section[leaf] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key, returning default when any part is missing."""
        node = self._config
        for name in key.split('.'):
            if not isinstance(node, dict) or name not in node:
                return default
            node = node[name]
        return node

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)

    def validate(self) -> bool:
        """
        Check the merged settings.

        Raises:
            ConfigValidationError: Listing every problem found, '; ' separated.
        """
        problems = validate_config(self._config)
        if problems:
            raise ConfigValidationError("; ".join(problems))
        return True

    def __repr__(self) -> str:
        return f"ConfigParser(config_file={self.config_file})"


__all__ = ["ConfigParser", "ConfigValidationError"]

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
