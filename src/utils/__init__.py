"""Utils package"""

from .config import Config, config

__all__ = [
    "Config",
    "config",
]
