"""Convert PNG and JPEG images into plain, colored or edge-traced ASCII art."""

__version__ = "0.0.1a0"

__all__ = ["__version__"]