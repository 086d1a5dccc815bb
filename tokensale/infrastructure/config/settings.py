"""Provides functions for loading and accessing configuration settings.

Supports loading from .env files, environment variables, and a dedicated
configuration file (~/.tokensale/config.yaml).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".tokensale"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"
ENV_PREFIX = "TOKENSALE_"

# --- Global Configuration Store (Simple Approach) ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Turns nested YAML mappings into dotted keys ('mail': {'host': x} -> 'mail.host')."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def env_var_name(key: str) -> str:
    """Maps a dotted config key to its environment variable ('mail.host' -> 'TOKENSALE_MAIL_HOST')."""
    return ENV_PREFIX + key.upper().replace('.', '_')


def load_configuration(config_file: Path = DEFAULT_CONFIG_FILE, env_file: Optional[Path] = None) -> None:
    """Loads configuration from environment, .env file, and YAML file.

    Priority order (highest to lowest):
    1. Environment Variables
    2. .env file
    3. YAML configuration file
    4. Default values passed to get_config

    Args:
        config_file: Path to the YAML configuration file.
        env_file: Path to the .env file (searches upwards from cwd if None).
    """
    global _config, _loaded
    if _loaded:
        logger.debug("Configuration already loaded.")
        return

    _config = {}

    # 1. Load from YAML file (Lowest priority)
    if config_file.exists():
        try:
            with open(config_file, 'r') as f:
                yaml_config = yaml.safe_load(f)
            if isinstance(yaml_config, dict):
                _config.update(_flatten(yaml_config))
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. Load from .env file (Medium priority)
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        # override=False: real environment variables take precedence
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug("Skipping .env file loading (path not found or specified as None).")

    # 3. Environment Variables (Highest priority) are handled in get_config

    _loaded = True
    logger.info("Configuration loading process completed.")


def _coerce(value: str) -> Any:
    """Converts environment strings to bool/int/float where they look like one."""
    if value.lower() == 'true':
        return True
    if value.lower() == 'false':
        return False
    try:
        if '.' in value:
            return float(value)
        return int(value)
    except (ValueError, TypeError):
        return value


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dotted key.

    Priority:
    1. Test configuration
    2. Environment variable (TOKENSALE_ prefix, dots as underscores)
    3. YAML config
    4. Default value

    Args:
        key: The configuration key (e.g., 'mail.host')
        default: Default value if the key is not found

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = env_var_name(key)
    if env_key in os.environ:
        return _coerce(os.environ[env_key])

    if key in _config:
        return _config[key]

    logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
    return default


def get_bool(key: str, default: bool = False) -> bool:
    """Reads a flag, accepting 'true'/'false' strings as well as booleans."""
    flag = get_config(key, default)
    if isinstance(flag, str):
        if flag.lower() in ('true', 'yes', '1'):
            return True
        if flag.lower() in ('false', 'no', '0'):
            return False
        logger.warning(f"Unexpected string value for {key}: '{flag}'. Defaulting to {default}.")
        return default
    if flag is None:
        return default
    return bool(flag)


def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None


# --- Convenience Functions ---

def get_store_path() -> Path:
    """Location of the JSON application store."""
    return Path(str(get_config('store.path', DEFAULT_CONFIG_DIR / "applications.json"))).expanduser()


def get_link_base_url() -> str:
    """Base URL of the applicant page; the private id is appended as a fragment."""
    return str(get_config('presale.link_base_url', 'https://blockfood.io/pre-sale'))


def _optional_str(key: str) -> Optional[str]:
    value = get_config(key)
    return None if value is None else str(value)


def _optional_bool(key: str) -> Optional[bool]:
    """None when unset, so the consumer can apply its own default."""
    return None if get_config(key) is None else get_bool(key)


def get_mail_settings() -> Dict[str, Any]:
    """Collects the SMTP settings for SmtpEmailSender."""
    return {
        'host': str(get_config('mail.host', 'localhost')),
        'port': int(get_config('mail.port', 587)),
        'username': _optional_str('mail.username'),
        'password': _optional_str('mail.password'),
        'use_tls': get_bool('mail.use_tls', False),
        'start_tls': _optional_bool('mail.start_tls'),
        'from_email': str(get_config('mail.from_email', 'presale@localhost')),
        'from_name': _optional_str('mail.from_name'),
        'suppress': get_bool('mail.suppress', False),
    }


def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """
    Set configuration values for testing purposes.
    These values will override any existing configuration.

    Args:
        config_dict: Dictionary of configuration values to set
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")


def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")
