"""Device bezel lookup and caching for screenshot framing."""

__version__ = "0.1.0"
