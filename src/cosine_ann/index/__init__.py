"""Vector index and similarity search."""

from cosine_ann.index.similarity import cosine_similarity
from cosine_ann.index.strategies import SearchStrategy, BruteForceSearch
from cosine_ann.index.vector_index import VectorIndex, SearchResult

__all__ = [
    "VectorIndex",
    "SearchResult",
    "SearchStrategy",
    "BruteForceSearch",
    "cosine_similarity",
]
