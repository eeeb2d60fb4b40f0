"""Configuration management"""
import os
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

from featurespec.utils.helpers import deep_get
from featurespec.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_CONFIG = {
    'parser': {
        'language': 'en',
        'languages_file': None,
    },
    'features': {
        'dir': 'features',
        'pattern': '**/*.feature',
    },
    'step_definitions': {},
    'logging': {
        'level': 'INFO',
    },
    'report': {
        'format': 'text',
    },
}


class ConfigManager:
    """Manages configuration loading and merging"""

    def __init__(self, config_path: str, environment: str = 'dev', env_file: str = '.env'):
        self.config_path = Path(config_path)
        self.environment = environment
        self.env_file = env_file
        self.config = {}

    def load_config(self) -> Dict[str, Any]:
        """Load and merge configuration files"""
        load_dotenv(self.env_file)
        self.config = self._merge_configs({}, DEFAULT_CONFIG)

        # Load main config
        if self.config_path.exists():
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self.config = self._merge_configs(self.config, yaml.safe_load(f) or {})
        else:
            logger.warning(f"Config file not found, using defaults: {self.config_path}")

        # Load environment specific config
        env_config_path = self.config_path.parent / 'environments' / f'{self.environment}.yaml'
        if env_config_path.exists():
            with open(env_config_path, 'r', encoding='utf-8') as f:
                env_config = yaml.safe_load(f) or {}

            # Overrides replace keys of a section before the deep merge
            if 'overrides' in env_config:
                self._apply_overrides(self.config, env_config.pop('overrides'))

            self.config = self._merge_configs(self.config, env_config)
        else:
            logger.debug(f"Environment config not found: {env_config_path}")

        self.config = self._process_env_vars(self.config)

        logger.info(f"Configuration loaded for environment: {self.environment}")
        return self.config

    def _merge_configs(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            elif isinstance(value, dict):
                result[key] = self._merge_configs({}, value)
            else:
                result[key] = value

        return result

    def _apply_overrides(self, base: Dict, overrides: Dict) -> None:
        """Apply overrides from environment config to base config"""
        for section, values in overrides.items():
            if section in base and isinstance(values, dict) and isinstance(base[section], dict):
                for key, value in values.items():
                    base[section][key] = value
            else:
                base[section] = values

    def _process_env_vars(self, config: Any) -> Any:
        """Replace ${VAR} or ${VAR:-default} with environment variables"""
        if isinstance(config, dict):
            return {k: self._process_env_vars(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._process_env_vars(item) for item in config]
        elif isinstance(config, str) and config.startswith('${') and config.endswith('}'):
            var_name, has_default, default = config[2:-1].partition(':-')
            return os.environ.get(var_name, default if has_default else config)
        else:
            return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)"""
        return deep_get(self.config, key, default)
