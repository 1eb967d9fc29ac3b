"""Centralized default configuration values for geobound.

These defaults are used by:
- CLI argument parsing (as fallbacks when args aren't provided)
- the polars frame helpers (default coordinate column names)
"""

# Bounding box defaults (Eastern US)
MIN_LAT = 25.0
MAX_LAT = 47.0
MIN_LON = -87.0
MAX_LON = -66.0

# Darwin Core coordinate columns
X_COLUMN = "decimalLongitude"
Y_COLUMN = "decimalLatitude"

PAD = 0.0

LOG_FILE: str | None = None
