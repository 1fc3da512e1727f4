"""
Upstream source reading.
"""

from .client import SourceReader, fetch
from .config import SourceConfig

__all__ = [
    "SourceConfig",
    "SourceReader",
    "fetch",
]
