"""SVG serialization helpers."""
