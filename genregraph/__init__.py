"""Genre/artist 3D graph construction and layout."""

__version__ = "0.1.0"
