"""Internal utility helpers for tinyuri."""
