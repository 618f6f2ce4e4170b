"""
Punto Hogar Utilities Package

Shared utilities:
- Configuration management
- Logging setup
"""

from puntohogar.utils.config import load_config
from puntohogar.utils.logging import setup_logging

__all__ = ["load_config", "setup_logging"]
