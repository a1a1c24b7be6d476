"""Runners that drive the frame pipeline over a source."""
