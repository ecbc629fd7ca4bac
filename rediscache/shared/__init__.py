"""Shared utilities: telemetry (logging)."""
