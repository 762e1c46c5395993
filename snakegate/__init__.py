"""A terminal snake game with gates, items, missions and four stage maps."""

__version__ = "0.1.0"