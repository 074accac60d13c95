"""Core types: results, exit codes and configuration."""

from .config import Config, ConfigError, load_config, load_config_or_default
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
