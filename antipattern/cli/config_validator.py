"""
Configuration validation for the anti-pattern detector.
Validates configuration before connecting to the graph store.
"""

import os
import logging
from pathlib import Path
from typing import Dict, List, Tuple, Any

import yaml

logger = logging.getLogger(__name__)

VALID_URI_SCHEMES = ('neo4j', 'neo4j+s', 'neo4j+ssc', 'bolt', 'bolt+s', 'bolt+ssc')
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigurationValidator:
    """Validates detector configuration to prevent runtime errors."""
    
    def __init__(self):
        self.errors = []
        self.warnings = []
    
    def validate(self, config: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate configuration.
        
        Returns:
            Tuple of (is_valid, list_of_issues)
        """
        self.errors = []
        self.warnings = []
        
        if not isinstance(config, dict):
            self.errors.append("Configuration must be a dictionary")
            return False, list(self.errors)
        
        self._validate_neo4j_config(config.get('neo4j', {}))
        self._validate_benchmark_config(config.get('benchmark', {}))
        self._validate_logging_config(config.get('logging', {}))
        
        all_issues = self.errors + self.warnings
        is_valid = len(self.errors) == 0
        
        return is_valid, all_issues
    
    def _validate_neo4j_config(self, neo4j_config: Dict[str, Any]):
        """Validate Neo4j connection settings."""
        if not isinstance(neo4j_config, dict):
            self.errors.append("neo4j section must be a dictionary")
            return
        
        uri = neo4j_config.get('uri', '')
        if not isinstance(uri, str) or not uri:
            self.errors.append(f"neo4j.uri must be a non-empty string, got: {uri!r}")
        elif uri.split('://', 1)[0] not in VALID_URI_SCHEMES:
            self.errors.append(f"Invalid neo4j.uri scheme: {uri}")
        
        username = neo4j_config.get('username', '')
        password = neo4j_config.get('password', '')
        if bool(username) != bool(password):
            self.warnings.append("Only one of neo4j.username and neo4j.password is set - connecting without auth")
    
    def _validate_benchmark_config(self, benchmark_config: Dict[str, Any]):
        """Validate benchmark wait intervals."""
        if not isinstance(benchmark_config, dict):
            self.errors.append("benchmark section must be a dictionary")
            return
        
        for key in ('reset_wait_seconds', 'index_wait_seconds'):
            value = benchmark_config.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                self.errors.append(f"benchmark.{key} must be a non-negative number, got: {value!r}")
    
    def _validate_logging_config(self, logging_config: Dict[str, Any]):
        """Validate logging settings."""
        if not isinstance(logging_config, dict):
            self.errors.append("logging section must be a dictionary")
            return
        
        level = logging_config.get('level', 'INFO')
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            self.errors.append(f"Invalid logging.level: {level!r}")
        
        log_file = logging_config.get('file')
        if log_file:
            log_dir = Path(log_file).parent
            if not log_dir.exists():
                self.warnings.append(f"Log directory does not exist: {log_dir}")


def validate_config_file(config_path: str) -> Tuple[bool, List[str]]:
    """
    Validate a configuration file.
    
    Returns:
        Tuple of (is_valid, list_of_issues)
    """
    issues = []
    
    config_file = Path(config_path)
    
    if not config_file.exists():
        issues.append(f"Configuration file not found: {config_path}")
        return False, issues
    
    if not os.access(config_file, os.R_OK):
        issues.append(f"Configuration file is not readable: {config_path}")
        return False, issues
    
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        issues.append(f"Invalid YAML syntax in config file: {e}")
        return False, issues
    
    # An empty file falls back to defaults
    if config is not None and not isinstance(config, dict):
        issues.append("Configuration file must contain a dictionary at root level")
        return False, issues
    
    return True, issues
