"""Chat-style assistant for scheduling and tracking business calls."""
