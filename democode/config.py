"""Configuration management."""

import os


# Sample selection (comma list, run in order)
DEMO_SAMPLES = os.getenv("DEMO_SAMPLES", "lambda")

# Parallel demo
DEMO_PARALLEL_COUNT = os.getenv("DEMO_PARALLEL_COUNT", "20")
DEMO_PARALLEL_DELAY = os.getenv("DEMO_PARALLEL_DELAY", "0.001")
