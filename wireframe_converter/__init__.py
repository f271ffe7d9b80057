"""Wireframe-to-HTML conversion service backed by a vision chat model."""

__version__ = "0.1.0"
