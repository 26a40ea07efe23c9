"""Configuration package"""

from .logging import setup_logging
from .settings import Config, get_config

__all__ = ["Config", "get_config", "setup_logging"]
