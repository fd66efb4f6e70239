"""API route registry (metadata, registry, generator)."""
