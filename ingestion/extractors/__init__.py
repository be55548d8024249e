"""Content API clients."""
