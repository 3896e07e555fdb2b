"""Configuration module."""

from .defaults import *

__all__ = [
    "DEFAULT_TOP_K",
    "SCORE_PRECISION",
    "DEFAULT_LOG_LEVEL",
    "DEMO_VECTORS",
    "DEMO_QUERY",
    "DEMO_BAD_VECTOR",
]
