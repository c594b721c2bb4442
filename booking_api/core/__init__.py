"""Core application primitives (settings, database, unit of work, errors)."""
