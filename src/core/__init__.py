"""
Core utilities and cross-cutting concerns for the XMI translator.

- Run configuration (TranslationConfig, load_config)
- Logging setup (setup_logging, JSONFormatter)

Usage:
    from core import TranslationConfig, load_config, setup_logging
"""

from .config import TranslationConfig, load_config
from .logging_setup import JSONFormatter, setup_logging

__all__ = [
    'TranslationConfig',
    'load_config',
    'JSONFormatter',
    'setup_logging',
]
