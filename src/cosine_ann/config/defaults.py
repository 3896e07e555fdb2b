"""Configuration defaults."""

# Search
DEFAULT_TOP_K = 3

# Output
SCORE_PRECISION = 4

# Logging
DEFAULT_LOG_LEVEL = "WARNING"

# Demo dataset: three vectors pointing one way, three the opposite way
DEMO_VECTORS = [
    [1.0, 2.0, 3.0],
    [4.0, 5.0, 6.0],
    [7.0, 8.0, 9.0],
    [-1.0, -2.0, -3.0],
    [-4.0, -5.0, -6.0],
    [-7.0, -8.0, -9.0],
]
DEMO_QUERY = [1.0, 3.0, 5.0]
DEMO_BAD_VECTOR = [6.0, 7.0]
