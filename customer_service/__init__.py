"""Customer service: cached customer reads with event-driven invalidation."""

__version__ = "0.1.0"
