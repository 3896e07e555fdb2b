from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

import numpy as np

from cosine_ann.index.similarity import cosine_similarity


class SearchStrategy(ABC):
    """Ranks stored vectors against a query, best match first."""

    @abstractmethod
    def rank(self, query: np.ndarray, vectors: Sequence[np.ndarray]) -> List[Tuple[int, float]]:
        """Return ``(position, score)`` pairs for ``vectors`` sorted by descending score."""


class BruteForceSearch(SearchStrategy):
    """
    Scores every stored vector with cosine similarity.
    Ties keep insertion order (stable sort).
    """

    def rank(self, query: np.ndarray, vectors: Sequence[np.ndarray]) -> List[Tuple[int, float]]:
        scored = [(pos, cosine_similarity(query, vec)) for pos, vec in enumerate(vectors)]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        return scored
