"""Hotel management backend: check-in, room inventory, ordering and billing."""
__version__ = "1.0.0"
