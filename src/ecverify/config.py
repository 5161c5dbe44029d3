"""
Configuration management for the verification service.

This module provides configuration file support for the CLI and RPC
surfaces, allowing users to pick the default curve, hash function, log level
and RPC settings via a configuration file or environment variables.
The verification functions themselves never read configuration.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any

from ecverify.curves import CurveParams, get_curve
from ecverify.verifier import get_hash_function

logger = logging.getLogger(__name__)


class VerifierConfig:
    """Verifier configuration manager"""

    ENV_PREFIX = "ECVERIFY_"

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: ~/.ecverify/ecverify.conf)
        """
        if config_path is None:
            config_path = Path.home() / ".ecverify" / "ecverify.conf"

        self.config_path = Path(config_path)
        self.config = configparser.ConfigParser()

        self.defaults = {
            'curve': 'secp256r1',
            'hashfunc': 'sha256',
            'loglevel': 'WARNING',
            'benchiterations': '100',
            'rpcbind': '127.0.0.1',
            'rpcport': '8765',
        }

        if self.config_path.exists():
            try:
                self.config.read(self.config_path)
            except configparser.Error as e:
                logger.warning(f"Error reading config file {self.config_path}: {e}")

    def get(self, key: str, section: str = 'DEFAULT') -> Optional[str]:
        """
        Get config value.

        Priority order:
        1. Environment variable (ECVERIFY_<KEY>)
        2. Config file value (given section, then DEFAULT)
        3. Default value

        Args:
            key: Config key
            section: Config section (default: 'DEFAULT')

        Returns:
            Config value or default
        """
        env_value = os.environ.get(f"{self.ENV_PREFIX}{key.upper()}")
        if env_value:
            return env_value

        if self.config.has_option(section, key):
            return self.config.get(section, key)
        if self.config.has_option('DEFAULT', key):
            return self.config.get('DEFAULT', key)

        return self.defaults.get(key)

    def getint(self, key: str, section: str = 'DEFAULT') -> int:
        """
        Get config value as integer.

        Unparseable values fall back to 0.
        """
        value = self.get(key, section)
        if value is None:
            value = self.defaults.get(key, '0')
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Config value for {key!r} is not an integer: {value!r}")
            return 0

    def getboolean(self, key: str, section: str = 'DEFAULT') -> bool:
        """Get config value as boolean"""
        value = self.get(key, section)
        if value is None:
            value = self.defaults.get(key, '0')
        return value.lower() in ('1', 'true', 'yes', 'on')

    @property
    def curve(self) -> CurveParams:
        """
        Configured default curve.

        Raises:
            UnsupportedCurveError: If the configured name is not supported
        """
        return get_curve(self.get('curve'))

    @property
    def hash_function(self) -> str:
        """
        Configured default hash function name.

        Raises:
            UnsupportedHashFunctionError: If the configured name is not supported
        """
        name = self.get('hashfunc')
        get_hash_function(name)
        return name

    @property
    def log_level(self) -> int:
        """Configured log level as a logging constant"""
        level = logging.getLevelName((self.get('loglevel') or 'WARNING').upper())
        if not isinstance(level, int):
            logger.warning(f"Unknown log level {self.get('loglevel')!r}, using WARNING")
            return logging.WARNING
        return level

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert config to dictionary.

        Returns:
            Dictionary with all configuration values
        """
        return {
            'curve': self.get('curve'),
            'hash_function': self.get('hashfunc'),
            'log_level': self.get('loglevel'),
            'bench_iterations': self.getint('benchiterations'),
            'rpc_bind': self.get('rpcbind'),
            'rpc_port': self.getint('rpcport'),
        }
