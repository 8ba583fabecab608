"""
Configuration management for the token race CLI.

Handles loading and managing settings from files and environment.
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class GameConfig:
    """Manages CLI configuration settings."""

    DEFAULT_CONFIG = {
        # Game settings
        'board_size': 3,
        'bot_player': 1,          # 0, 1, or None for two humans
        'max_depth': None,        # None searches to terminal positions
        'player1_name': 'Player 1',
        'player2_name': 'Computer',

        # Replay display
        'show_replay': False,
        'replay_delay_ms': 500,

        # Output formatting
        'color_output': True,

        # CLI behavior
        'verbose': False,
        'quiet': False,
    }

    INT_KEYS = ('board_size', 'replay_delay_ms')
    OPTIONAL_INT_KEYS = ('bot_player', 'max_depth')
    BOOL_KEYS = ('show_replay', 'color_output', 'verbose', 'quiet')

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default locations.
        """
        self._config = self.DEFAULT_CONFIG.copy()
        self._config_file = config_file or self._find_config_file()
        self._load_config()

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations."""
        config_locations = [
            # Current directory
            Path.cwd() / '.token-race.json',
            Path.cwd() / 'token-race.json',
            # Home directory
            Path.home() / '.token-race.json',
            Path.home() / '.config' / 'token-race.json',
        ]

        for config_path in config_locations:
            if config_path.exists() and config_path.is_file():
                logger.debug(f"Found config file: {config_path}")
                return str(config_path)

        return None

    def _load_config(self):
        """Load configuration from file and environment variables."""
        if self._config_file and os.path.exists(self._config_file):
            try:
                with open(self._config_file, 'r') as f:
                    file_config = json.load(f)
                    self._config.update(file_config)
                    logger.debug(f"Loaded config from {self._config_file}")
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Failed to load config file {self._config_file}: {e}")

        self._load_env_config()

    def _load_env_config(self):
        """Load configuration from environment variables."""
        env_mappings = {
            'TOKEN_RACE_BOARD_SIZE': 'board_size',
            'TOKEN_RACE_BOT_PLAYER': 'bot_player',
            'TOKEN_RACE_MAX_DEPTH': 'max_depth',
            'TOKEN_RACE_PLAYER1_NAME': 'player1_name',
            'TOKEN_RACE_PLAYER2_NAME': 'player2_name',
            'TOKEN_RACE_SHOW_REPLAY': 'show_replay',
            'TOKEN_RACE_REPLAY_DELAY_MS': 'replay_delay_ms',
            'TOKEN_RACE_COLOR': 'color_output',
            'TOKEN_RACE_VERBOSE': 'verbose',
            'TOKEN_RACE_QUIET': 'quiet',
        }

        for env_var, config_key in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue

            if config_key in self.BOOL_KEYS:
                self._config[config_key] = env_value.lower() in ('true', '1', 'yes', 'on')
            elif config_key in self.OPTIONAL_INT_KEYS and env_value.lower() in ('', 'none'):
                self._config[config_key] = None
            elif config_key in self.INT_KEYS or config_key in self.OPTIONAL_INT_KEYS:
                try:
                    self._config[config_key] = int(env_value)
                except ValueError:
                    logger.warning(f"Invalid integer value for {config_key}: {env_value}")
            else:
                self._config[config_key] = env_value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config[key] = value

    def save(self, config_file: str = None):
        """Save current configuration to file."""
        target_file = config_file or self._config_file
        if not target_file:
            config_dir = Path.home() / '.config'
            config_dir.mkdir(exist_ok=True)
            target_file = str(config_dir / 'token-race.json')

        try:
            with open(target_file, 'w') as f:
                json.dump(self._config, f, indent=2)
            logger.info(f"Configuration saved to {target_file}")
        except IOError as e:
            logger.error(f"Failed to save config to {target_file}: {e}")
            raise

    def to_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary."""
        return self._config.copy()

    def __repr__(self):
        return f"GameConfig(config_file={self._config_file})"


# Global configuration instance
_config = None

def get_config() -> GameConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = GameConfig()
    return _config

def set_config(config: GameConfig):
    """Set global configuration instance."""
    global _config
    _config = config
