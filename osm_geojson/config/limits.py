"""Batch and request size limits."""

import os

# Largest Overpass "elements" array accepted by POST /api/convert
MAX_ELEMENTS_PER_REQUEST = int(os.getenv("MAX_ELEMENTS_PER_REQUEST", "200000"))

# Ring assembly is quadratic in the member count of a single relation
MAX_RELATION_MEMBERS = int(os.getenv("MAX_RELATION_MEMBERS", "20000"))

# Worker threads for batch conversion (capped at 8 like the other pools)
CONVERT_WORKERS = int(os.getenv("CONVERT_WORKERS", str(min(8, os.cpu_count() or 2))))

# Batches smaller than this are converted inline
PARALLEL_MIN_BATCH = int(os.getenv("PARALLEL_MIN_BATCH", "5000"))
