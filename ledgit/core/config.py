"""Configuration management for Ledgit.

This module provides a clean interface for reading
both repository-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional

from .hash import DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS


class Config:
    """
    Manages Ledgit configuration files.
    
    Configuration is stored in INI format:
    - Global config: ~/.ledgitconfig
    - Repository config: any file passed by the caller
    
    Repository config takes precedence over global config.
    Environment variables take highest precedence.
    """
    
    GLOBAL_CONFIG_PATH = Path.home() / '.ledgitconfig'
    
    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Initialize Config manager.
        
        Args:
            repo_config_path: Path to repository config file, if any
        """
        self.repo_config_path = Path(repo_config_path) if repo_config_path else None
        self._global_config = None
        self._repo_config = None
    
    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.GLOBAL_CONFIG_PATH.exists():
                self._global_config.read(self.GLOBAL_CONFIG_PATH)
        return self._global_config
    
    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = configparser.ConfigParser()
            if self.repo_config_path.exists():
                self._repo_config.read(self.repo_config_path)
        return self._repo_config
    
    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.
        
        Priority order (highest to lowest):
        1. Environment variables (LEDGIT_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Fallback value
        
        Args:
            section: Config section (e.g., 'user', 'core')
            key: Config key (e.g., 'name', 'email')
            fallback: Default value if not found
            
        Returns:
            Configuration value or fallback
        """
        env_key = f"LEDGIT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value
        
        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)
        
        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)
        
        return fallback
    
    def get_hash_algorithm(self) -> str:
        """
        Get the content hash algorithm (core.hashalgorithm).
        
        Raises:
            ValueError: If the configured algorithm is not supported
        """
        algorithm = self.get('core', 'hashalgorithm', DEFAULT_ALGORITHM).strip().lower()
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"Unsupported core.hashalgorithm: {algorithm}")
        return algorithm
    
    def get_user_identity(self) -> tuple:
        """
        Get user name and email for commits.
        
        Returns:
            Tuple of (name, email), either may be None
        """
        name = self.get('user', 'name')
        email = self.get('user', 'email')
        return name, email
    
    def get_author(self) -> str:
        """Commit author as "Name <email>", or '' when no name is configured."""
        name, email = self.get_user_identity()
        if not name:
            return ''
        return f"{name} <{email}>" if email else name


def get_config(repo_config_path: Optional[Path] = None) -> Config:
    """
    Get a Config instance.
    
    Args:
        repo_config_path: Repository config file, or None for global-only config
        
    Returns:
        Config instance
    """
    return Config(repo_config_path)
