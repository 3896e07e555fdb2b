import numpy as np


def as_vector(values) -> np.ndarray:
    """Coerce ``values`` to a float64 array without touching the caller's buffer."""
    return np.array(values, dtype=np.float64, copy=True)


def _unit(vec: np.ndarray):
    # Scale by the largest component first so the squared sum stays finite
    peak = np.max(np.abs(vec)) if vec.size else 0.0
    if peak == 0.0 or not np.isfinite(peak):
        return None
    scaled = vec / peak
    return scaled / np.sqrt(np.dot(scaled, scaled))


def cosine_similarity(a, b) -> float:
    a = _unit(np.asarray(a, dtype=np.float64))
    b = _unit(np.asarray(b, dtype=np.float64))

    # Zero vectors are unrelated to everything, themselves included
    if a is None or b is None:
        return 0.0
    return float(np.clip(np.dot(a, b), -1.0, 1.0))
