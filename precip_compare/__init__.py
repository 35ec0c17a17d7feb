"""Side-by-side monthly precipitation comparison for climate scenarios."""

__version__ = "0.1.0"
