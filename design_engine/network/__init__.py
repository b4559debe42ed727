"""
Network access for the design engine.
"""

from .loader import DocumentLoader

__all__ = ['DocumentLoader']
