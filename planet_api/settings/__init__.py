from .config import Settings, settings, get_settings
from .logging_config import setup_logging

__all__ = ["Settings", "settings", "get_settings", "setup_logging"]
