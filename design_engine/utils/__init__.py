"""
Utility modules for the design engine.
"""

from design_engine.utils.config import Config, DEFAULT_CONFIG
from design_engine.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'DEFAULT_CONFIG',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
