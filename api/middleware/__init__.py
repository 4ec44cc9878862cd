"""Authentication dependencies for routes."""
