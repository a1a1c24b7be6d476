"""Geometry, frame I/O and shared utilities."""
