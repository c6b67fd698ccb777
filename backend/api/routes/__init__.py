"""API-level routes (health, readiness, welcome)."""
