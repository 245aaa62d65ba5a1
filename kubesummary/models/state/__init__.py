"""Application state and settings models."""
