from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from cosine_ann.exceptions import DimensionMismatch
from cosine_ann.index.similarity import as_vector
from cosine_ann.index.strategies import BruteForceSearch, SearchStrategy
from cosine_ann.utils.logger import get_logger

logger = get_logger(__name__)


class SearchResult(NamedTuple):
    vector: np.ndarray
    score: float


class VectorIndex:
    """
    In-memory store of equal-length vectors answering top-k cosine queries.

    The first inserted vector fixes the dimensionality for the lifetime of
    the index. Storage is append-only; vectors are copied on the way in and
    on the way out so callers never share memory with the index.
    """

    def __init__(self, strategy: Optional[SearchStrategy] = None):
        self.strategy = strategy or BruteForceSearch()
        self._entries: List[np.ndarray] = []
        self._dim: Optional[int] = None

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"VectorIndex(size={len(self)}, dimensionality={self._dim})"

    @property
    def dimensionality(self) -> Optional[int]:
        return self._dim

    @property
    def entries(self) -> Tuple[np.ndarray, ...]:
        """Copies of the stored vectors in insertion order."""
        return tuple(vec.copy() for vec in self._entries)

    def _validate(self, vec: np.ndarray, action: str) -> None:
        if vec.ndim != 1:
            raise DimensionMismatch(
                self._dim,
                vec.size,
                f"Can only {action} one-dimensional vectors, got shape {vec.shape}",
            )
        if vec.shape[0] == 0:
            raise DimensionMismatch(self._dim, 0, f"Cannot {action} an empty vector")
        if self._dim is not None and vec.shape[0] != self._dim:
            raise DimensionMismatch(self._dim, vec.shape[0])

    def insert(self, vector) -> None:
        """Append ``vector``; the first insert fixes the dimensionality."""
        vec = as_vector(vector)
        try:
            self._validate(vec, "insert")
        except DimensionMismatch as e:
            logger.warning(f"Rejected insert: {e}")
            raise

        vec.flags.writeable = False
        if self._dim is None:
            self._dim = vec.shape[0]
            logger.debug(f"Index dimensionality fixed at {self._dim}")
        self._entries.append(vec)
        logger.debug(f"Inserted vector #{len(self._entries)}")

    def query_top_k(self, query, k: int) -> List[SearchResult]:
        """
        Return the ``k`` stored vectors most similar to ``query``.

        Results are sorted by descending cosine similarity; equal scores keep
        insertion order. Fewer than ``k`` results come back when the index
        holds fewer vectors.

        Raises:
            DimensionMismatch: the index is non-empty and ``query`` has the
                wrong length.
            ValueError: ``k`` is negative.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")

        vec = as_vector(query)
        if not self._entries:
            return []
        try:
            self._validate(vec, "query with")
        except DimensionMismatch as e:
            logger.warning(f"Rejected query: {e}")
            raise

        if k == 0:
            return []

        ranked = self.strategy.rank(vec, self._entries)[:k]
        logger.debug(f"Scored {len(self._entries)} vectors, returning {len(ranked)}")
        return [SearchResult(self._entries[pos].copy(), score) for pos, score in ranked]
