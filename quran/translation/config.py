"""
Quran Translation Alignment Configuration Module

Handles loading and merging of configuration from YAML files and .env overrides.
No other module should read configuration files directly. All access goes
through an instance of the `Config` class (see `load_config`).
"""
import os
import yaml

from quran.translation.logger import get_logger

logger = get_logger(__name__)

CONFIG_NAMESPACES = ('app', 'data')


class ConfigObject:
    """
    A dictionary-like object that allows accessing keys as attributes, e.g.
    `cfg.data.paths` instead of `cfg['data']['paths']`. Nested dicts are
    converted recursively.
    """
    def __init__(self, data):
        for key, value in (data or {}).items():
            if not str(key).isidentifier():
                logger.warning(f"Config key '{key}' is not a valid identifier and will be skipped for dot notation.")
                continue

            if isinstance(value, dict):
                setattr(self, key, ConfigObject(value))
            else:
                setattr(self, key, value)

    def get(self, key, default=None):
        return getattr(self, key, default)

    def __repr__(self):
        return repr(self.__dict__)


class Config:
    """
    Loads `app.yaml` and `data.yaml` from a config directory into separate
    namespaces and applies local overrides from a .env file.

    Configuration is accessed using dot notation, e.g.
    `config.app.logging.level` or `config.data.paths.chapters_file`.
    """
    def __init__(self, config_dir='./config', env_file='.env'):
        self._config = {
            name: self._load_yaml(os.path.join(config_dir, f'{name}.yaml')) or {}
            for name in CONFIG_NAMESPACES
        }

        if env_file and os.path.exists(env_file):
            logger.info(f"Applying overrides from '{env_file}'...")
            self._apply_env_overrides(env_file)

        self._structured_config = ConfigObject(self._config)

    def _load_yaml(self, path):
        """Loads a single YAML file."""
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found: {path}")
        with open(path, 'r', encoding='utf-8') as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as exc:
                logger.error(f"Error parsing YAML file {path}: {exc}")
                raise

    def _apply_env_overrides(self, env_file):
        """Parses a .env file of dotted keys and updates the configuration dictionary."""
        with open(env_file, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue

                if '=' not in line:
                    logger.warning(f"Skipping malformed line in .env: {line}")
                    continue

                key, value = line.split('=', 1)
                self._set_nested_key(self._config, key.strip(), _coerce(value.strip().strip('"\'')))

    def _set_nested_key(self, d, key_str, value):
        """Sets a value in a nested dictionary using a dot-separated key."""
        keys = key_str.split('.')
        current_level = d
        for key in keys[:-1]:
            current_level = current_level.setdefault(key, {})
        current_level[keys[-1]] = value

    def as_dict(self):
        return self._config

    def __getattr__(self, name):
        """Allows direct access to the top-level configuration groups."""
        if name.startswith('_'):
            raise AttributeError(name)
        if hasattr(self._structured_config, name):
            return getattr(self._structured_config, name)
        raise AttributeError(f"'Config' object has no attribute '{name}'")


def _coerce(value):
    if value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    if value.isdigit():
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


def load_config(config_dir='./config', env_file='.env'):
    return Config(config_dir=config_dir, env_file=env_file)
