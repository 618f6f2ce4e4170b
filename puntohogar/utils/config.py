"""
Configuration Management

Load and validate configuration from YAML and environment variables.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent.parent

DEFAULT_DB_PATH = './data/punto_hogar.db'


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    env_path: Optional[Union[str, Path]] = None
) -> Dict[str, Any]:
    """
    Load configuration from YAML file and environment variables.

    Environment variables override YAML values.

    Args:
        config_path: Path to YAML config file (default: config/config.yaml)
        env_path: Path to .env file (default: .env in the project root)

    Returns:
        Configuration dictionary
    """
    env_path = Path(env_path) if env_path else PROJECT_ROOT / ".env"
    config_path = Path(config_path) if config_path else PROJECT_ROOT / "config" / "config.yaml"

    # Load environment variables (existing ones win)
    if env_path.exists():
        load_dotenv(env_path)

    # Load YAML config
    config = {}
    if config_path.exists():
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

    # Expand environment variable references in config
    config = _expand_env_vars(config)

    # Override with direct environment variables
    config = _apply_env_overrides(config)

    # Ensure defaults
    database = config.setdefault('database', {})
    database.setdefault('path', DEFAULT_DB_PATH)
    database.setdefault('seed_on_startup', True)

    config.setdefault('logging', {}).setdefault('level', 'INFO')

    server = config.setdefault('server', {})
    server.setdefault('host', '0.0.0.0')
    server.setdefault('port', 3000)
    server.setdefault('debug', False)
    server.setdefault('static_dir', './dist')

    config.setdefault('cors', {}).setdefault('origins', ['*'])

    return config


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand ${VAR} references in config values."""
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str) and obj.startswith('${') and obj.endswith('}'):
        var_name = obj[2:-1]
        return os.environ.get(var_name, obj)
    return obj


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply direct environment variable overrides."""

    # Database
    if os.environ.get('PUNTOHOGAR_DB_PATH'):
        config.setdefault('database', {})['path'] = os.environ['PUNTOHOGAR_DB_PATH']
    if os.environ.get('PUNTOHOGAR_SEED'):
        config.setdefault('database', {})['seed_on_startup'] = _as_bool(os.environ['PUNTOHOGAR_SEED'])

    # Logging
    if os.environ.get('PUNTOHOGAR_LOG_LEVEL'):
        config.setdefault('logging', {})['level'] = os.environ['PUNTOHOGAR_LOG_LEVEL']
    if os.environ.get('PUNTOHOGAR_LOG_FILE'):
        config.setdefault('logging', {})['file'] = os.environ['PUNTOHOGAR_LOG_FILE']

    # Server
    if os.environ.get('PUNTOHOGAR_HOST'):
        config.setdefault('server', {})['host'] = os.environ['PUNTOHOGAR_HOST']
    if os.environ.get('PORT'):
        config.setdefault('server', {})['port'] = int(os.environ['PORT'])
    if os.environ.get('FLASK_DEBUG'):
        config.setdefault('server', {})['debug'] = _as_bool(os.environ['FLASK_DEBUG'])
    if os.environ.get('PUNTOHOGAR_STATIC_DIR'):
        config.setdefault('server', {})['static_dir'] = os.environ['PUNTOHOGAR_STATIC_DIR']

    # CORS
    if os.environ.get('CORS_ALLOWED_ORIGINS'):
        origins = [o.strip() for o in os.environ['CORS_ALLOWED_ORIGINS'].split(',') if o.strip()]
        config.setdefault('cors', {})['origins'] = origins

    return config


def get_db_path(config: Dict[str, Any]) -> str:
    """Get database path from config."""
    return config.get('database', {}).get('path', DEFAULT_DB_PATH)
