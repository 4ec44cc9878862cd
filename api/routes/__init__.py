"""API routes that don't belong to a feature module."""
