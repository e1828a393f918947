#!/usr/bin/env python3
"""
Configuration loader for the Process Anti-Pattern Detector

Loads the YAML configuration with environment variable substitution and
merges it over the built-in defaults.
"""

import os
import re
import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from ..errors import ConfigurationError
from .config_validator import ConfigurationValidator, validate_config_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'neo4j': {
        'uri': '${NEO4J_URI:-neo4j://localhost}',
        'username': '${NEO4J_USERNAME:-}',
        'password': '${NEO4J_PASSWORD:-}',
        'database': None
    },
    'benchmark': {
        'reset_wait_seconds': 2,
        'index_wait_seconds': 5
    },
    'logging': {
        'level': 'INFO',
        'file': None
    }
}

ENV_VAR_PATTERN = re.compile(r'\$\{([^}:]+)(?::-([^}]*))?\}')


def substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values.
    
    Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax.
    """
    if isinstance(value, str):
        def replace(match):
            var_name, default = match.group(1), match.group(2)
            env_value = os.getenv(var_name)
            if env_value is None:
                if default is None:
                    logger.warning(f"Environment variable {var_name} not set")
                env_value = default or ""
            return env_value
        
        return ENV_VAR_PATTERN.sub(replace, value)
    
    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}
    
    elif isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    
    else:
        return value


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_default_config_path() -> Optional[Path]:
    """Get the default configuration file path, None when it does not exist."""
    default_config = Path(__file__).parent.parent.parent / 'config' / 'detector_config.yaml'
    return default_config if default_config.exists() else None


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration, falling back to the defaults.
    
    Args:
        config_path: Path to the configuration YAML file, the default file
            is used when omitted
    
    Returns:
        Configuration dictionary
    """
    raw_config: Dict[str, Any] = {}
    
    path = Path(config_path) if config_path else get_default_config_path()
    if path is not None:
        is_valid, file_issues = validate_config_file(str(path))
        if not is_valid:
            for issue in file_issues:
                logger.error(f"Config file validation: {issue}")
            raise ConfigurationError("; ".join(file_issues))
        
        with open(path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f) or {}
        logger.debug(f"Loaded configuration file {path}")
    
    config = substitute_env_vars(merge_config(DEFAULT_CONFIG, raw_config))
    
    validator = ConfigurationValidator()
    is_valid, config_issues = validator.validate(config)
    
    for issue in config_issues:
        if issue in validator.errors:
            logger.error(f"Config validation error: {issue}")
        else:
            logger.warning(f"Config validation warning: {issue}")
    
    if not is_valid:
        raise ConfigurationError("; ".join(validator.errors))
    
    return config
