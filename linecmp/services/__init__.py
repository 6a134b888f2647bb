"""Services module - Business logic layer"""

from .line_loader import LineLoader
from .set_engine import SetEngine
from .result_formatter import ResultFormatter, truncate
from .config_manager import ConfigManager

__all__ = [
    "LineLoader",
    "SetEngine",
    "ResultFormatter",
    "truncate",
    "ConfigManager",
]
