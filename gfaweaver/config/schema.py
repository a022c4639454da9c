"""
GFAWeaver v0.1.0

Configuration schema for GFAWeaver.

Defines all available configuration parameters with defaults and validation.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml

from ..gfa.fields import IntegerDecoding


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Record construction
    # ========================================================================
    'records': {
        'integer_decoding': 'decimal',  # 'decimal' or 'char_code' (legacy)
    },

    # ========================================================================
    # GFA reading
    # ========================================================================
    'reader': {
        'strict': True,  # Stop at the first invalid line
        'unsupported_records': 'skip',  # C/P lines: 'skip' or 'error'
    },

    # ========================================================================
    # GFA writing
    # ========================================================================
    'writer': {
        'compress': False,  # Gzip normalized output
    },

    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'INFO',
    },
}

TEMPLATES = ('default', 'lenient', 'legacy')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Raised when a configuration file cannot be read or fails validation."""
    pass


def read_config_file(config_path: Path) -> Dict[str, Any]:
    """
    Read a YAML config file into a dictionary.

    An empty file reads as an empty dictionary.

    Raises:
        ConfigValidationError: If the file is not valid YAML or its top
            level is not a mapping.
    """
    try:
        with open(config_path) as f:
            user_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in config file {config_path}: {e}") from e

    if user_config is None:
        return {}
    if not isinstance(user_config, dict):
        raise ConfigValidationError(f"Config file {config_path} must contain a mapping")
    return user_config


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary

    Raises:
        ConfigValidationError: If the file is not a YAML mapping.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if config_path.exists():
            config = deep_merge(config, read_config_file(config_path))

    return config


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path, template: str = 'default'):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default', 'lenient', 'legacy')
    """
    if template not in TEMPLATES:
        raise ValueError(f"Unknown template '{template}', expected one of {TEMPLATES}")

    config = copy.deepcopy(DEFAULT_CONFIG)

    # Customize for specific templates
    if template == 'lenient':
        config['reader']['strict'] = False
        config['reader']['unsupported_records'] = 'skip'

    elif template == 'legacy':
        # Reproduce count tags written by older tools
        config['records']['integer_decoding'] = 'char_code'

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    sections = {}
    for name in DEFAULT_CONFIG:
        section = config.get(name, {})
        if isinstance(section, dict):
            sections[name] = section
        else:
            # null or scalar section; its keys cannot be checked
            errors.append(f"Section '{name}' must be a mapping, got {section!r}")

    if 'records' in sections:
        decoding = sections['records'].get('integer_decoding')
        valid_decodings = [d.value for d in IntegerDecoding]
        if decoding not in valid_decodings:
            errors.append(f"Invalid records.integer_decoding: {decoding} (expected one of {valid_decodings})")

    if 'reader' in sections:
        reader = sections['reader']
        if not isinstance(reader.get('strict'), bool):
            errors.append(f"reader.strict must be true or false, got {reader.get('strict')!r}")
        if reader.get('unsupported_records') not in ('skip', 'error'):
            errors.append(f"Invalid reader.unsupported_records: {reader.get('unsupported_records')}")

    if 'writer' in sections and not isinstance(sections['writer'].get('compress'), bool):
        errors.append("writer.compress must be true or false")

    if 'logging' in sections:
        level = str(sections['logging'].get('level', '')).upper()
        if level not in LOG_LEVELS:
            errors.append(f"Invalid logging.level: {level}")

    return errors


def reader_options(config: Dict[str, Any]) -> Dict[str, Any]:
    """Translate a configuration into keyword arguments for read_gfa."""
    return {
        'strict': config['reader']['strict'],
        'unsupported_records': config['reader']['unsupported_records'],
        'int_decoding': IntegerDecoding(config['records']['integer_decoding']),
    }

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
