"""Composable procedural renders for frame-based video: pixels, vectors, timed values, paths and the render interface."""

__version__ = "0.1.0"