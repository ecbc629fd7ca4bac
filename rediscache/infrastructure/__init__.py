"""Infrastructure layer: Redis-backed cache."""
