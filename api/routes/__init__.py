"""Application-level routes (health/readiness)."""
