"""XPM loading, X11 colour names, pixel images, buffered line reading and C-style helpers."""

__version__ = "0.1.0"