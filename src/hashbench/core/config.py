"""
Configuration Management

Centralized configuration management with YAML file support
and environment variable overrides.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()

# SipHash reference key: bytes 0x00 .. 0x0f.
DEFAULT_SIPHASH_KEY = "000102030405060708090a0b0c0d0e0f"


@dataclass
class BenchmarkSettings:
    """Benchmark execution settings."""
    siphash_key: str = DEFAULT_SIPHASH_KEY
    max_runs: int = 1_000_000

    @property
    def siphash_key_bytes(self) -> bytes:
        return bytes.fromhex(self.siphash_key)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/hashbench.log"
    max_size: str = "10MB"
    backup_count: int = 5


@dataclass
class ReportingConfig:
    """Reporting configuration."""
    show_summary: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "Hash Benchmark"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    benchmark: BenchmarkSettings = field(default_factory=BenchmarkSettings)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    reporting: ReportingConfig = field(default_factory=ReportingConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_path}: {e}")

        return cls.from_dict(config_data, source=str(config_path))

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any], source: str = "built-in defaults") -> "AppConfig":
        """Build configuration from parsed sections, applying environment overrides."""
        # Apply environment variable overrides
        config_data = cls._apply_env_overrides(config_data)

        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app')
            config_data.update(app_config)

        try:
            if 'benchmark' in config_data and isinstance(config_data['benchmark'], dict):
                config_data['benchmark'] = BenchmarkSettings(**config_data['benchmark'])

            if 'logging' in config_data and isinstance(config_data['logging'], dict):
                config_data['logging'] = LoggingConfig(**config_data['logging'])

            if 'reporting' in config_data and isinstance(config_data['reporting'], dict):
                config_data['reporting'] = ReportingConfig(**config_data['reporting'])

            config = cls(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration in {source}: {e}")

        config.validate()
        return config

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'HASHBENCH_LOG_LEVEL': ['logging', 'level'],
            'HASHBENCH_SIPHASH_KEY': ['benchmark', 'siphash_key'],
            'HASHBENCH_DEBUG': ['debug'],
            'HASHBENCH_ENVIRONMENT': ['environment'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                if config_path == ['debug']:
                    env_value = env_value.lower() in ('1', 'true', 'yes', 'on')
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = env_value

        return config_data

    def validate(self) -> None:
        """Check values that would otherwise fail deep inside a benchmark run."""
        try:
            key = self.benchmark.siphash_key_bytes
        except (TypeError, ValueError):
            raise ConfigurationError(
                "SipHash key must be a hex string",
                {'siphash_key': self.benchmark.siphash_key}
            )
        if len(key) != 16:
            raise ConfigurationError(
                "SipHash key must be exactly 16 bytes (32 hex characters)",
                {'siphash_key': self.benchmark.siphash_key}
            )

        if not isinstance(self.benchmark.max_runs, int) or self.benchmark.max_runs < 1:
            raise ConfigurationError(
                "max_runs must be a positive integer",
                {'max_runs': self.benchmark.max_runs}
            )

        for name in ('level', 'console_level'):
            level = getattr(self.logging, name)
            if not isinstance(logging.getLevelName(str(level).upper()), int):
                raise ConfigurationError(f"Unknown log level for logging.{name}: {level}")


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            # Default configuration path
            config_path = Path("config/default.yaml")

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Built-in defaults, still subject to environment overrides
            _config = AppConfig.from_dict({})

    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
