"""Arvia - minimal static-site toolchain with a live-reload dev server."""

__version__ = "2.0.0"
