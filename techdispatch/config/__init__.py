"""
Engine configuration package.
"""

from .logging import configure_logging, dispatch_context, get_logger
from .settings import Settings, settings

__all__ = ["Settings", "configure_logging", "dispatch_context", "get_logger", "settings"]
