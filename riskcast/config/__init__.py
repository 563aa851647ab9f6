"""
Engine configuration: frozen defaults, YAML overrides and validation.
"""

from .defaults import EngineConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = ["ConfigLoader", "ConfigValidator", "EngineConfig", "ValidationError", "get_default_config"]
