"""
Cosine ANN
Brute-force top-k similarity search over fixed-dimension vectors.
"""

__version__ = "0.1.0"

from .exceptions import DimensionMismatch
from .index import VectorIndex, SearchResult, cosine_similarity

__all__ = [
    "DimensionMismatch",
    "VectorIndex",
    "SearchResult",
    "cosine_similarity",
]
